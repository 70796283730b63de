"""HTTP layer: application factory, routers, dependencies and error handlers."""
