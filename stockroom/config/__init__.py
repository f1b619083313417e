"""Configuration package.

Note: Do not import and construct settings at package import time to keep
test collection free from environment requirements. Use
``stockroom.config.settings.get_settings`` where needed.
"""

__all__: list[str] = []
