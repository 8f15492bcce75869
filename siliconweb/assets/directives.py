"""
The asset directives behind the ``asset_tags`` template tags.

Every directive takes a :class:`~assets.state.RenderState`, the
:class:`~assets.conf.AssetSettings` defaults and a request built from the
tag arguments, and returns the text to put in place of the tag. Missing
required arguments make a directive a silent no-op.
"""
import dataclasses
import logging
import typing

from .locations import effective_css_url, effective_js_url, render_immediately
from .state import keyword_value

logger = logging.getLogger(__name__)

CSS_COLLECTION = "_CSS"
JS_COLLECTION = "_JS"
DIRECT_JS_COLLECTION = "_directJS"

LIST_TEMPLATE = (
    "<ul>\n"
    "{% for entry in entries %}\n"
    "<li>{{ entry.text }}</li>\n"
    "{% endfor %}\n"
    "</ul>"
)


def flag_enabled(value, default):
    if value is None:
        return default
    return value != "0"


class DirectiveRequest:
    @classmethod
    def from_args(cls, args):
        values = {}
        for field in dataclasses.fields(cls):
            values[field.name] = keyword_value(args.get(field.name))
        return cls(**values)


@dataclasses.dataclass(frozen=True)
class IncludeCssRequest(DirectiveRequest):
    file: typing.Optional[str] = None
    media: typing.Optional[str] = None


@dataclasses.dataclass(frozen=True)
class IncludeJsRequest(DirectiveRequest):
    file: typing.Optional[str] = None


@dataclasses.dataclass(frozen=True)
class DirectJsRequest:
    body: str = ""


@dataclasses.dataclass(frozen=True)
class RenderCssRequest(DirectiveRequest):
    comments: typing.Optional[str] = None


@dataclasses.dataclass(frozen=True)
class RenderJsRequest(DirectiveRequest):
    comments: typing.Optional[str] = None
    files: typing.Optional[str] = None
    direct: typing.Optional[str] = None


@dataclasses.dataclass(frozen=True)
class ListRequest(DirectiveRequest):
    collection: typing.Optional[str] = None


def include_css(state, config, request):
    if request.file is None:
        logger.debug("includeCss called without a file, ignoring")
        return ""

    href = effective_css_url(state, config) + request.file
    code = f'<link href="{href}" rel="stylesheet" type="text/css"'
    if request.media is not None:
        code += f' media="{request.media}"'
    code += " />"

    if render_immediately(state, config):
        return code

    logger.debug("Buffering stylesheet %s", href)
    state.add_to_collection(
        CSS_COLLECTION,
        {
            "file": request.file,
            "href": href,
            "media": request.media or "",
            "code": code,
        },
    )
    return ""


def include_js(state, config, request):
    if request.file is None:
        logger.debug("includeJs called without a file, ignoring")
        return ""

    src = effective_js_url(state, config) + request.file
    code = f'<script type="text/javascript" src="{src}" rel="stylesheet"></script>'

    if render_immediately(state, config):
        return code

    logger.debug("Buffering script %s", src)
    state.add_to_collection(
        JS_COLLECTION, {"file": request.file, "src": src, "code": code}
    )
    return ""


def direct_js(state, config, request):
    # Inline code always waits for renderJs, whatever the render mode
    if request.body:
        state.add_to_collection(DIRECT_JS_COLLECTION, {"code": request.body})
    return ""


def _join_code(records):
    return "".join(record["code"] + "\n" for record in records)


def render_css(state, config, request):
    records = state.get_collection(CSS_COLLECTION)
    if not records:
        return ""

    out = _join_code(records)
    if flag_enabled(request.comments, default=False):
        out = "<!-- Start styles -->\n" + out + "<!-- End styles -->\n"
    return out


def render_js(state, config, request):
    files = state.get_collection(JS_COLLECTION)
    direct = state.get_collection(DIRECT_JS_COLLECTION)
    if not files and not direct:
        return ""

    out = ""
    if files and flag_enabled(request.files, default=True):
        out += _join_code(files)
    if direct and flag_enabled(request.direct, default=True):
        out += '<script type="text/javascript">' + _join_code(direct) + "</script>\n"

    if flag_enabled(request.comments, default=False):
        out = "<!-- Start scripts -->\n" + out + "<!-- End scripts -->\n"
    return out


def list_collection(state, config, request):
    if request.collection is None:
        logger.debug("list called without a collection, ignoring")
        return ""

    return state.parse(LIST_TEMPLATE, entries=state.get_collection(request.collection))
