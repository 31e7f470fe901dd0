"""Template source for the generated router module.

Rendered with a kida Environment by :mod:`hono_router.codegen.emitter`.
"""

ROUTER_MODULE_TS = """\
// Generated by hono-router. Do not edit: changes are overwritten.

import { Hono, Env } from 'hono';

{{ imports }}

export const loadRoutes = <T extends Env>(app: Hono<T>) => {
\t{{ registrations }}
};
"""
