from django.template import Context, Engine, Template

from assets.conf import AssetSettings
from assets.state import RenderState


def make_state(**keywords):
    return RenderState(Context(keywords))


def buffered_config(**kwargs):
    return AssetSettings(render_immediately=False, **kwargs)


def render(template_text, **keywords):
    return Template("{% load asset_tags %}" + template_text).render(Context(keywords))


def make_engine(templates):
    return Engine(
        libraries={"asset_tags": "assets.templatetags.asset_tags"},
        loaders=[("django.template.loaders.locmem.Loader", templates)],
    )
