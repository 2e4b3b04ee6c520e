"""Tests for the compiled template set, context and template providers."""

import pytest

from alert_dispatch.alerts import Alert, AlertBatch, AlertStatus
from alert_dispatch.primitives.exceptions import RenderError
from alert_dispatch.template.context import TemplateContext
from alert_dispatch.template.providers.filesystem import FileSystemTemplateProvider
from alert_dispatch.template.providers.memory import InMemoryTemplateProvider
from alert_dispatch.template.registry import TemplateSet


@pytest.fixture
def context(firing_batch, settings):
    return TemplateContext(batch=firing_batch, settings=settings, receiver="ops")


def test_default_title(templates, context):
    rendered = templates.render("default.title", context)

    assert rendered.ok
    assert rendered.text == "[FIRING:1] HighCPU server1"


def test_default_title_lists_extra_common_labels(templates, settings):
    batch = AlertBatch.of(
        Alert(labels={"alertname": "HighCPU", "instance": "server1"}, status="firing"),
        group_labels={"alertname": "HighCPU"},
    )

    rendered = templates.render("default.title", TemplateContext(batch=batch, settings=settings))

    assert rendered.text == "[FIRING:1] HighCPU (server1)"


def test_default_title_for_resolved_batch(templates, resolved_batch, settings):
    rendered = templates.render(
        "default.title", TemplateContext(batch=resolved_batch, settings=settings)
    )

    assert rendered.text.startswith("[RESOLVED] ")


def test_default_message_lists_firing_and_resolved(
    templates, firing_alert, resolved_alert, settings
):
    batch = AlertBatch.of(firing_alert, resolved_alert)

    rendered = templates.render("default.message", TemplateContext(batch=batch, settings=settings))

    assert rendered.ok
    text = rendered.text
    assert "**Firing**" in text
    assert "**Resolved**" in text
    assert text.index("**Firing**") < text.index("**Resolved**")
    assert " - alertname = HighCPU" in text
    assert " - summary = CPU usage above 90%" in text
    assert "Source: http://grafana.local/alerting/1/view" in text


def test_nested_template_invocation(context):
    templates = TemplateSet(
        {
            "outer": 'A{% include "inner" %}C',
            "inner": "B-{{ receiver }}",
        }
    )

    assert templates.render("outer", context).text == "AB-opsC"


def test_supplied_source_overrides_default(context):
    templates = TemplateSet({"default.title": "custom {{ status }}"})

    assert templates.render("default.title", context).text == "custom firing"


def test_undefined_variable_is_reported_not_raised(context):
    templates = TemplateSet({"broken": "{{ no_such_field }}"})

    rendered = templates.render("broken", context)

    assert rendered.text == ""
    assert isinstance(rendered.error, RenderError)
    assert rendered.error.template_name == "broken"


def test_unknown_template_is_reported(templates, context):
    rendered = templates.render("does.not.exist", context)

    assert not rendered.ok
    assert "not defined" in str(rendered.error)


def test_render_errors_are_isolated_per_call(context):
    templates = TemplateSet({"broken": "{{ nope.deeper }}", "fine": "{{ status }}"})

    broken = templates.render("broken", context)
    fine = templates.render("fine", context)

    assert broken.error is not None
    assert fine.ok
    assert fine.text == "firing"


def test_syntax_error_fails_at_construction():
    with pytest.raises(RenderError) as exc_info:
        TemplateSet({"bad": "{% if %}"})

    assert exc_info.value.template_name == "bad"


def test_template_set_is_read_only(templates):
    with pytest.raises(TypeError):
        templates.sources["default.title"] = "x"  # type: ignore[index]

    assert "default.title" in templates
    assert "default.message" in templates.names()


def test_render_accepts_plain_mapping():
    templates = TemplateSet({"greet": "hello {{ name }}"}, include_defaults=False)

    assert templates.render("greet", {"name": "ops"}).text == "hello ops"
    assert templates.names() == ["greet"]


def test_context_variables(context):
    variables = context.variables

    assert variables["receiver"] == "ops"
    assert variables["status"] == AlertStatus.FIRING.value
    assert variables["alerting_list_url"] == "http://grafana.local/alerting/list"
    assert variables["version"] == "8.0.0"
    assert len(variables["alerts"]) == 1
    assert variables["resolved_alerts"] == []


@pytest.mark.asyncio
async def test_load_from_in_memory_provider(context):
    provider = InMemoryTemplateProvider({"slack.title": "{{ receiver }}!"})
    provider.add("slack.text", "{{ status }}")

    templates = await TemplateSet.load(provider)

    assert templates.render("slack.title", context).text == "ops!"
    assert templates.render("slack.text", context).text == "firing"
    assert "default.title" in templates


@pytest.mark.asyncio
async def test_load_from_filesystem(tmp_path, context):
    (tmp_path / "default.title.tmpl").write_text("FS {{ status }}", encoding="utf-8")
    (tmp_path / "__footer.tmpl").write_text("footer", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

    provider = FileSystemTemplateProvider(tmp_path)
    sources = await provider.load_all()
    templates = await TemplateSet.load(provider)

    assert set(sources) == {"default.title", "__footer"}
    assert templates.render("default.title", context).text == "FS firing"


@pytest.mark.asyncio
async def test_missing_template_directory_yields_no_sources(tmp_path):
    provider = FileSystemTemplateProvider(tmp_path / "missing")

    assert await provider.load_all() == {}
