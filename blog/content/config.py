from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULT_CONTENT_CONFIG = {
    "DEFAULT_CODE_LANGUAGE": "plaintext",
    # Fence tags owned by the later scanners; the code block pass skips them
    "SPECIAL_FENCES": ("playground", "chart", "mermaid"),
    "PLAYGROUND_DEFAULTS": {
        "language": "javascript",
        "readOnly": True,
        "height": "500px",
    },
    "DEFAULT_CHART_TYPE": "line",
    "YOUTUBE_EMBED_URL": "https://www.youtube.com/embed/{id}",
    "INSTAGRAM_EMBED_URL": "https://www.instagram.com/p/{id}/embed",
    "GALLERY_CLASS": "gallery-container",
    "INTERLEAVE_RICH_TEXT": False,
}


def get_content_config():
    """
    Configuration for the post content pipeline.

    Defaults live in DEFAULT_CONTENT_CONFIG. A project can override any key
    through a ``BLOG_CONTENT`` dict in its Django settings:

        BLOG_CONTENT = {
            "PLAYGROUND_DEFAULTS": {"height": "320px"},
            "INTERLEAVE_RICH_TEXT": True,
        }

    Nested dicts (PLAYGROUND_DEFAULTS) are merged key by key. When Django
    settings are not configured at all the defaults are returned, so the
    scanners stay usable outside a project.
    """
    config = dict(DEFAULT_CONTENT_CONFIG)
    config["PLAYGROUND_DEFAULTS"] = dict(DEFAULT_CONTENT_CONFIG["PLAYGROUND_DEFAULTS"])

    try:
        overrides = getattr(settings, "BLOG_CONTENT", None) or {}
    except ImproperlyConfigured:
        return config

    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key] = {**config[key], **value}
        else:
            config[key] = value

    config["SPECIAL_FENCES"] = tuple(config["SPECIAL_FENCES"])
    return config
