"""URL path fragments shared by the route modules."""

USER = "/user"
PACKAGE = "/package"

CREATE = "/create"
UPDATE = "/update"
DELETE = "/delete"
FIND_ALL = "/find-all"
FIND_BY_ID = "/find-by-id"

HEALTH = "/health"
