from typing import Any, Iterable, List, Optional, Union

from fastapi import Request
from fastapi.responses import JSONResponse

from siren.config.settings import settings
from siren.models.action import Action
from siren.models.constants import SELF, Method
from siren.models.field import Field
from siren.models.link import Link
from siren.models.root import Root
from siren.services.json_codec import write_text


# -----------------------------------------------------------------------------
# Response
# -----------------------------------------------------------------------------
class SirenResponse(JSONResponse):
    """JSON response rendered with the Siren codec and media type."""
    media_type = settings.MEDIA_TYPE

    def render(self, content: Any) -> bytes:
        if isinstance(content, Root):
            content = content.to_raw()
        return write_text(content).encode("utf-8")


# -----------------------------------------------------------------------------
# Links and actions from routes
# -----------------------------------------------------------------------------
def build_link(
    request: Request,
    rel: Union[str, List[str]],
    route_name: str,
    *,
    title: Optional[str] = None,
    type: Optional[str] = None,
    **path_params: Any,
) -> Link:
    return (
        Link.new_builder(rel, str(request.url_for(route_name, **path_params)))
        .title(title)
        .type(type)
        .build()
    )


def build_self_link(request: Request) -> Link:
    return Link.new_builder(SELF, str(request.url)).build()


def build_action(
    request: Request,
    name: str,
    route_name: str,
    *,
    method: Union[str, Method] = Method.GET,
    fields: Iterable[Field] = (),
    title: Optional[str] = None,
    type: Optional[str] = None,
    **path_params: Any,
) -> Action:
    fields = list(fields)
    return (
        Action.new_builder(name, str(request.url_for(route_name, **path_params)))
        .method(method)
        .title(title)
        .type(type)
        .fields(fields or None)
        .build()
    )


def with_self_link(request: Request, root: Root) -> Root:
    """Prepend a ``self`` link unless the document already has one."""
    if any(SELF in link.rel for link in root.links):
        return root
    return root.replace(links=(build_self_link(request), *root.links))
