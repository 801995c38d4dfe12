"""
Service layer abstraction.

Each service encapsulates the logic behind one capability.  Handlers never
construct services directly; they resolve them from the request scope so
lifetimes are decided in one place, ``main.configure_services``.
"""
