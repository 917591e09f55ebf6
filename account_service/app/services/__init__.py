"""
Service layer.

Lookups (``AccountService``, ``ContactService``) sit on top of the
store, ``AccountContext`` memoizes them for one request and
``account_web_service`` exposes the ``get_account`` operation.
"""
