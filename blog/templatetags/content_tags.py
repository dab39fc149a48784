# blog/templatetags/content_tags.py

from django import template
from django.utils.html import json_script

from blog.content import assemble_fragments, fragments_to_dicts

register = template.Library()


@register.filter(name="content_fragments")
def content_fragments_filter(value):
    """
    Split a post body into fragment dicts for template rendering:

        {% for fragment in post.content|content_fragments %}
            {% if fragment.type == "text" %}{{ fragment.content|safe }}{% endif %}
            ...
        {% endfor %}
    """
    return fragments_to_dicts(assemble_fragments(value or ""))


@register.filter(name="fragment_type")
def fragment_type_filter(fragment):
    """Type tag of a fragment, whether a dataclass or its dict form."""
    if isinstance(fragment, dict):
        return fragment.get("type", "")
    return getattr(fragment, "type", "")


@register.simple_tag
def fragments_json_script(value, element_id):
    """Emit the fragments as a JSON <script> for a client-side renderer."""
    return json_script(fragments_to_dicts(assemble_fragments(value or "")), element_id)
