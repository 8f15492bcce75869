import pytest
from django.template import Context, Engine, Template, TemplateSyntaxError
from django.test import override_settings

from assets.conf import AssetSettings
from assets.templatetags.asset_tags import build_library
from tests.helpers import make_engine, render


def test_include_css_tag():
    assert render(
        '{% includeCss file="app.css" %}',
        _baseURL="http://cdn.example.com",
        _cssURL="assets/css",
    ) == '<link href="http://cdn.example.com/assets/css/app.css" rel="stylesheet" type="text/css" />'


def test_include_css_tag_with_variables():
    assert render(
        '{% includeCss file=name media=media %}',
        name="app.css",
        media="screen",
    ) == '<link href="app.css" rel="stylesheet" type="text/css" media="screen" />'


def test_include_tags_without_file():
    assert render('{% includeCss %}{% includeJs %}{% renderCss comments="1" %}{% renderJs comments="1" %}') == ""


def test_include_js_tag():
    assert render('{% includeJs file="app.js" %}', _jsURL="/js") == (
        '<script type="text/javascript" src="js/app.js" rel="stylesheet"></script>'
    )


def test_buffered_styles():
    assert render(
        '{% includeCss file="a.css" %}{% includeCss file="b.css" %}{% renderCss comments="1" %}',
        _renderResources="0",
    ) == (
        "<!-- Start styles -->\n"
        '<link href="a.css" rel="stylesheet" type="text/css" />\n'
        '<link href="b.css" rel="stylesheet" type="text/css" />\n'
        "<!-- End styles -->\n"
    )


def test_buffered_scripts():
    actual = render(
        '{% includeJs file="a.js" %}'
        "{% directJs %}var x = {{ x }};{% enddirectJs %}"
        "{% renderJs %}",
        _renderResources="0",
        x=3,
    )
    assert actual == (
        '<script type="text/javascript" src="a.js" rel="stylesheet"></script>\n'
        '<script type="text/javascript">var x = 3;\n</script>\n'
    )


def test_direct_js_is_buffered_when_rendering_immediately():
    assert render("{% directJs %}go();{% enddirectJs %}before{% renderJs %}") == (
        'before<script type="text/javascript">go();\n</script>\n'
    )


def test_direct_js_empty_body():
    assert render('{% directJs %}{% enddirectJs %}{% renderJs comments="1" %}') == ""


def test_direct_js_without_end_tag():
    with pytest.raises(TemplateSyntaxError):
        Template("{% load asset_tags %}{% directJs %}go();")


def test_positional_arguments_are_rejected():
    with pytest.raises(TemplateSyntaxError):
        Template('{% load asset_tags %}{% includeCss "app.css" %}')


def test_list_tag():
    assert render('{% list collection="items" %}', items=[{"text": "a"}]) == "<ul>\n\n<li>a</li>\n\n</ul>"
    assert render("{% list %}", items=[{"text": "a"}]) == ""


def test_loaded_keyword_is_set():
    context = Context()
    Template('{% load asset_tags %}{% renderCss %}').render(context)
    assert context.get("_siliconWeb") == "1"


def test_collections_survive_include_and_blocks():
    engine = make_engine(
        {
            "base.html": "{% load asset_tags %}{% block content %}{% endblock %}{% renderCss %}",
            "part.html": '{% load asset_tags %}{% includeCss file="part.css" %}',
            "page.html": (
                '{% extends "base.html" %}{% load asset_tags %}'
                '{% block content %}{% with x=1 %}{% include "part.html" %}{% endwith %}'
                '{% includeCss file="page.css" %}{% endblock %}'
            ),
        }
    )
    assert engine.get_template("page.html").render(Context({"_renderResources": "0"})) == (
        '<link href="part.css" rel="stylesheet" type="text/css" />\n'
        '<link href="page.css" rel="stylesheet" type="text/css" />\n'
    )


def test_build_library_with_own_defaults():
    engine = Engine()
    engine.template_libraries["cdn_assets"] = build_library(
        AssetSettings(base_url="http://cdn.example.com", css_path="/css", render_immediately=False)
    )
    template = engine.from_string('{% load cdn_assets %}{% includeCss file="app.css" %}|{% renderCss %}')
    assert template.render(Context()) == (
        '|<link href="http://cdn.example.com/css/app.css" rel="stylesheet" type="text/css" />\n'
    )


@override_settings(SILICONWEB={"BASE_URL": "http://cdn.example.com", "JS_PATH": "js"})
def test_defaults_from_settings():
    assert render('{% includeJs file="app.js" %}') == (
        '<script type="text/javascript" src="http://cdn.example.com/js/app.js" rel="stylesheet"></script>'
    )


@override_settings(SILICONWEB={"RENDER_IMMEDIATELY": False})
def test_render_mode_from_settings():
    assert render('{% includeCss file="a.css" %}') == ""
    assert render('{% includeCss file="a.css" %}', _renderResources="1") == (
        '<link href="a.css" rel="stylesheet" type="text/css" />'
    )


def test_boolean_flags():
    template = '{% includeJs file="a.js" %}{% directJs %}go();{% enddirectJs %}'
    assert render(template + "{% renderJs files=False direct=False %}", _renderResources="0") == ""
    assert render(template + "{% renderJs files=False comments=False %}", _renderResources="0") == (
        '<script type="text/javascript">go();\n</script>\n'
    )
    assert render(template + "{% renderJs direct=False comments=True %}", _renderResources="0") == (
        "<!-- Start scripts -->\n"
        '<script type="text/javascript" src="a.js" rel="stylesheet"></script>\n'
        "<!-- End scripts -->\n"
    )


def test_render_css_comments_false():
    assert render('{% includeCss file="a.css" %}{% renderCss comments=False %}', _renderResources="0") == (
        '<link href="a.css" rel="stylesheet" type="text/css" />\n'
    )


def test_list_tag_with_any_iterable():
    entries = ({"text": name} for name in ["a", "b"])
    assert render('{% list collection="items" %}', items=entries) == (
        "<ul>\n\n<li>a</li>\n\n<li>b</li>\n\n</ul>"
    )
    assert render('{% list collection="items" %}', items="ab") == "<ul>\n\n</ul>"
