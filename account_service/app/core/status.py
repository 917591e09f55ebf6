"""
Return codes carried in service responses.

These mirror HTTP status semantics but travel inside the response body;
the transport status of a service call is always 200.  Only ``BAD``,
``NOTFOUND``, ``ISE`` and ``OK`` are produced by ``get_account``; the
rest are reserved for sibling operations.
"""

from enum import IntEnum


class ReturnCode(IntEnum):
    OK = 200
    CREATED = 201
    ACCEPTED = 202
    BAD = 400
    FORBIDDEN = 403
    NOTFOUND = 404
    NOTALLOWED = 405
    ISE = 500
