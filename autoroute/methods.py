"""
HTTP method constants shared by name decoding and the router.
"""

# RFC 7231 Section 4.3, in match order
RFC_HTTP_METHODS = (
    "GET", "POST", "HEAD", "OPTIONS", "PUT", "DELETE", "CONNECT", "TRACE",
)

#: Verbs a route registered through ``any()`` answers to.
ANY_METHODS = RFC_HTTP_METHODS + ("PATCH",)

#: Route under every verb the router recognises for the path.
ANY_VERB = "*"
