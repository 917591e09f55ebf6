"""
Pydantic schema definitions.

Record schemas (``Account``, ``Contact``) describe rows read from the
store.  Wire schemas (``AccountContextIn``, ``AccountResponse``,
``ContactResponse``) describe the request and response bodies of the
service and use camelCase aliases on the wire.
"""
