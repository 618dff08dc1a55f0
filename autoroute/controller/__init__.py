"""
autoroute controller system

Routes are derived from controller method names instead of per-route
declarations.

Example:
    from autoroute import Router, attach_controller

    class ControllerUsers:
        def init(self):
            self.repo = UserRepo()

        def before(self, ctx):
            ctx.state["user"] = self.repo.current(ctx)

        def get(self, ctx):                 # GET  /users/
            ...

        def get_profile(self, ctx):         # GET  /users/profile
            ...

        def post_avatar(self, ctx):         # POST /users/avatar
            ...

        def action_ping(self, ctx):         # any  /users/ping
            ...

    router = Router()
    attach_controller(router, ControllerUsers())
"""

from .naming import (
    ACTION_MARKERS,
    MethodBinding,
    decode_method,
    http_verb,
)
from .paths import (
    CONTROLLER_PREFIX,
    compose_path,
    controller_prefix,
)
from .registrar import (
    attach_controller,
    embed_controller,
    register_controller,
)

__all__ = [
    # Naming
    "ACTION_MARKERS",
    "MethodBinding",
    "decode_method",
    "http_verb",

    # Paths
    "CONTROLLER_PREFIX",
    "compose_path",
    "controller_prefix",

    # Registration
    "attach_controller",
    "embed_controller",
    "register_controller",
]
