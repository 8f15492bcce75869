BASE_URL_KEYWORD = "_baseURL"
CSS_URL_KEYWORD = "_cssURL"
JS_URL_KEYWORD = "_jsURL"
RENDER_KEYWORD = "_renderResources"


def add_slash(path):
    return path.rstrip("/") + "/" if path else path


def effective_base_url(state, config):
    base_url = state.get_keyword(BASE_URL_KEYWORD)
    if base_url is None:
        base_url = config.base_url
    return add_slash(base_url)


def _asset_url(state, config, keyword, default):
    path = state.get_keyword(keyword)
    if path is None:
        path = default

    base_url = effective_base_url(state, config)
    if not base_url and not path:
        return ""

    if path.startswith("/"):
        path = path[1:]

    return add_slash(base_url + path)


def effective_css_url(state, config):
    return _asset_url(state, config, CSS_URL_KEYWORD, config.css_path)


def effective_js_url(state, config):
    return _asset_url(state, config, JS_URL_KEYWORD, config.js_path)


def render_immediately(state, config):
    """Whether includes are emitted in place (True) or buffered for renderCss/renderJs."""
    value = state.get_keyword(RENDER_KEYWORD)
    if not value:
        return config.render_immediately
    return value != "0"
