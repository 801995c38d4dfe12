"""
API package containing the endpoint routers.

``router.router`` includes them under their prefixes for ``main``.
"""
