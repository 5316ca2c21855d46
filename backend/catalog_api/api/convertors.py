"""Path Convertors — resource ids that may contain slashes.

Invariants:
    - "nonempty" captures one or more characters, slashes included; an empty id never matches
    - "release_detail" is "nonempty" minus any id ending in /tracks, so
      /releases/{id}/tracks always routes to the release track listing

Design Decisions:
    - Registered at import; route modules import this module before declaring paths
"""

from starlette.convertors import PathConvertor, register_url_convertor


class NonEmptyPathConvertor(PathConvertor):
    regex = ".+"


class ReleaseDetailConvertor(PathConvertor):
    regex = "(?!.*/tracks$).+"


register_url_convertor("nonempty", NonEmptyPathConvertor())
register_url_convertor("release_detail", ReleaseDetailConvertor())
