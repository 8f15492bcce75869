import dataclasses
import functools
import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.signals import setting_changed
from django.dispatch import receiver

logger = logging.getLogger(__name__)

SETTING_NAME = "SILICONWEB"

SETTING_KEYS = {
    "BASE_URL": "base_url",
    "CSS_PATH": "css_path",
    "JS_PATH": "js_path",
    "RENDER_IMMEDIATELY": "render_immediately",
}


@dataclasses.dataclass(frozen=True)
class AssetSettings:
    """Defaults used when a render context doesn't set its own keywords."""

    base_url: str = ""
    css_path: str = ""
    js_path: str = ""
    render_immediately: bool = True

    def replace(self, **changes):
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_settings(cls):
        raw = getattr(settings, SETTING_NAME, None) or {}
        if not isinstance(raw, dict):
            raise ImproperlyConfigured(f"{SETTING_NAME} must be a dict")

        unknown = sorted(set(raw) - set(SETTING_KEYS))
        if unknown:
            raise ImproperlyConfigured(
                f"Unknown {SETTING_NAME} keys: {', '.join(unknown)}"
            )

        values = {}
        for key, field in SETTING_KEYS.items():
            if key not in raw:
                continue
            value = raw[key]
            if field == "render_immediately":
                if not isinstance(value, bool):
                    raise ImproperlyConfigured(
                        f"{SETTING_NAME}['{key}'] must be True or False"
                    )
            elif not isinstance(value, str):
                raise ImproperlyConfigured(f"{SETTING_NAME}['{key}'] must be a string")
            values[field] = value

        return cls(**values)

    def as_setting(self):
        return {key: getattr(self, field) for key, field in SETTING_KEYS.items()}


@functools.lru_cache(maxsize=None)
def get_asset_settings():
    return AssetSettings.from_settings()


@receiver(setting_changed)
def reset_asset_settings(*, setting, **kwargs):
    if setting == SETTING_NAME:
        logger.debug("%s changed, dropping cached asset settings", SETTING_NAME)
        get_asset_settings.cache_clear()
