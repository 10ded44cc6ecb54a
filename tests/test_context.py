from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from boot.native import is_native_image
from common.config import BootSettings
from common.schema import ContextValidationError, PlanEntry, normalize_context
from orchestrator import build as build_stage

CONTEXT_YAML = """
application: app
stack_id: test-stack-id
buildpack:
  info:
    id: paketo-buildpacks/spring-boot
    name: Paketo Spring Boot Buildpack
    version: 3.0.0
  metadata:
    dependencies:
      - id: spring-cloud-bindings
        version: 1.1.0
        stacks: [test-stack-id]
plan:
  entries:
    - name: spring-boot
      metadata:
        native-image: false
"""


def test_normalize_context_anchors_application(tmp_path: Path) -> None:
    context = normalize_context(yaml.safe_load(CONTEXT_YAML), base_dir=tmp_path)
    assert context.application_path == tmp_path / "app"
    assert context.stack_id == "test-stack-id"
    assert context.buildpack.version == "3.0.0"
    assert context.buildpack.dependencies[0].stacks == ("test-stack-id",)
    assert context.plan == (PlanEntry(name="spring-boot", metadata={"native-image": False}),)


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {},
        {"application": "app", "buildpack": {"metadata": {"dependencies": [{"id": "x"}]}}},
        {"application": "app", "plan": {"entries": [{"metadata": {}}]}},
        {"application": "app", "plan": {"entries": "nope"}},
    ],
)
def test_normalize_context_rejects_invalid_payloads(payload: object) -> None:
    with pytest.raises(ContextValidationError):
        normalize_context(payload)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("entries", "expected"),
    [
        ((), False),
        ((PlanEntry("spring-boot", {"native-image": True}),), True),
        ((PlanEntry("spring-boot", {"native-image": "true"}),), True),
        ((PlanEntry("spring-boot", {"native-image": False}),), False),
        ((PlanEntry("jvm-application", {"native-image": True}),), False),
        ((PlanEntry("jvm-application"), PlanEntry("spring-boot", {"native-image": True})), True),
    ],
)
def test_is_native_image(entries: tuple, expected: bool) -> None:
    assert is_native_image(entries, BootSettings()) is expected


def test_cli_writes_result_json(tmp_path: Path) -> None:
    app = tmp_path / "app"
    (app / "META-INF").mkdir(parents=True)
    (app / "META-INF" / "MANIFEST.MF").write_text("Spring-Boot-Version: 2.3.0\n", encoding="utf-8")
    context_path = tmp_path / "context.yaml"
    context_path.write_text(CONTEXT_YAML, encoding="utf-8")
    output = tmp_path / "out" / "result.json"

    assert build_stage.main(["--context", str(context_path), "--output", str(output)]) == 0

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["labels"][0] == {"key": "org.springframework.boot.version", "value": "2.3.0"}
    assert [layer["name"] for layer in payload["layers"]] == [
        "helper",
        "web-application-type",
        "spring-cloud-bindings",
    ]
    assert [entry["name"] for entry in payload["bom"]] == ["dependencies", "helper", "spring-cloud-bindings"]


def test_cli_reports_failure(tmp_path: Path) -> None:
    app = tmp_path / "app"
    (app / "META-INF").mkdir(parents=True)
    (app / "META-INF" / "MANIFEST.MF").write_text("Spring-Boot-Version: 2.3.0\n", encoding="utf-8")
    (app / "META-INF" / "spring-configuration-metadata.json").write_text("{", encoding="utf-8")
    context_path = tmp_path / "context.json"
    context_path.write_text(json.dumps({"application": str(app)}), encoding="utf-8")

    assert build_stage.main(["--context", str(context_path)]) == 1
