import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class AssetsConfig(AppConfig):
    name = "assets"
    verbose_name = "Assets"

    def ready(self):
        from .conf import get_asset_settings

        config = get_asset_settings()
        logger.info(
            "Asset tags ready (base_url=%r, css_path=%r, js_path=%r, render_immediately=%s)",
            config.base_url,
            config.css_path,
            config.js_path,
            config.render_immediately,
        )
