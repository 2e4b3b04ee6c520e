"""Built-in template definitions.

``default.title`` and ``default.message`` are what every notifier renders unless
a channel names other templates. The double-underscore templates are helpers
invoked from them. A supplied source with the same name replaces a default.
"""

from __future__ import annotations

SUBJECT = """\
[{{ status | upper }}{% if status == "firing" %}:{{ firing_alerts | length }}{% endif %}] \
{{ group_labels | dictsort | map(attribute=1) | join(" ") }}
{%- set extra = common_labels | dictsort | rejectattr(0, "in", group_labels)
    | map(attribute=1) | list %}
{%- if extra %} ({{ extra | join(" ") }}){% endif %}"""

TEXT_ALERT_LIST = """\
{% macro text_alert_list(alerts) %}
{% for alert in alerts %}

Labels:
{% for name, value in alert.labels | dictsort %}
 - {{ name }} = {{ value }}
{% endfor %}
Annotations:
{% for name, value in alert.annotations | dictsort %}
 - {{ name }} = {{ value }}
{% endfor %}
Source: {{ alert.generatorURL }}
{% endfor %}
{% endmacro %}"""

DEFAULT_TITLE = """{% include "__subject" %}"""

DEFAULT_MESSAGE = """\
{% from "__text_alert_list" import text_alert_list %}
{% if firing_alerts %}
**Firing**
{{ text_alert_list(firing_alerts) }}
{% if resolved_alerts %}

{% endif %}
{% endif %}
{% if resolved_alerts %}
**Resolved**
{{ text_alert_list(resolved_alerts) }}
{% endif %}"""

DEFAULT_TEMPLATES: dict[str, str] = {
    "__subject": SUBJECT,
    "__text_alert_list": TEXT_ALERT_LIST,
    "default.title": DEFAULT_TITLE,
    "default.message": DEFAULT_MESSAGE,
}

DEFAULT_TITLE_TEMPLATE = "default.title"
DEFAULT_MESSAGE_TEMPLATE = "default.message"
