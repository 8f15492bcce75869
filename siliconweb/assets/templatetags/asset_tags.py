from django import template
from django.utils.safestring import mark_safe

from assets import directives
from assets.conf import get_asset_settings
from assets.state import RenderState

LOADED_KEYWORD = "_siliconWeb"


def get_state(context):
    state = RenderState(context)
    if not state.has_keyword(LOADED_KEYWORD):
        state.set_global_keyword(LOADED_KEYWORD, "1")
    return state


class DirectJsNode(template.Node):
    def __init__(self, nodelist, get_config):
        self.nodelist = nodelist
        self.get_config = get_config

    def render(self, context):
        request = directives.DirectJsRequest(body=str(self.nodelist.render(context)))
        return directives.direct_js(get_state(context), self.get_config(), request)


def build_library(config=None):
    """
    Build a tag library bound to ``config``. Without one, the defaults come
    from ``settings.SILICONWEB`` at render time.
    """
    register = template.Library()

    def get_config():
        return config if config is not None else get_asset_settings()

    def run(directive, request_class, context, args):
        request = request_class.from_args(args)
        return mark_safe(directive(get_state(context), get_config(), request))

    @register.simple_tag(takes_context=True, name="includeCss")
    def include_css(context, **args):
        return run(directives.include_css, directives.IncludeCssRequest, context, args)

    @register.simple_tag(takes_context=True, name="includeJs")
    def include_js(context, **args):
        return run(directives.include_js, directives.IncludeJsRequest, context, args)

    @register.simple_tag(takes_context=True, name="renderCss")
    def render_css(context, **args):
        return run(directives.render_css, directives.RenderCssRequest, context, args)

    @register.simple_tag(takes_context=True, name="renderJs")
    def render_js(context, **args):
        return run(directives.render_js, directives.RenderJsRequest, context, args)

    @register.simple_tag(takes_context=True, name="list")
    def list_collection(context, **args):
        return run(directives.list_collection, directives.ListRequest, context, args)

    @register.tag(name="directJs")
    def direct_js(parser, token):
        nodelist = parser.parse(("enddirectJs",))
        parser.delete_first_token()
        return DirectJsNode(nodelist, get_config)

    return register


register = build_library()
