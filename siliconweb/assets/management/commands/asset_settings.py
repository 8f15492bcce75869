from django.core.management.base import BaseCommand
from assets.conf import get_asset_settings


class Command(BaseCommand):
    help = "Prints the default asset locations used by the asset template tags"

    def handle(self, *args, **kwargs):
        for key, value in get_asset_settings().as_setting().items():
            self.stdout.write(f"{key} = {value!r}")
