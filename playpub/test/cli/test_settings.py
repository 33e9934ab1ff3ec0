from __future__ import annotations

from pathlib import Path

from playpub.cli.settings import PublishOverrides, apply_overrides, resolve_request
from playpub.core.config import NoteConfig, PublishConfig
from playpub.core.result import Err, Ok
from playpub.publish.model import BuildResult, ReleaseNote


def test_overrides_win_over_file_values() -> None:
    cfg = PublishConfig(apk_files_pattern="a/*.apk", track="beta", rollout_percentage="5")

    out = apply_overrides(cfg, PublishOverrides(track="production", reuse_expansion=True))

    assert out.apk_files_pattern == "a/*.apk"
    assert out.track == "production"
    assert out.rollout_percentage == "5"
    assert out.use_previous_expansion_files_if_missing is True


def test_resolve_request_expands_variables(tmp_path: Path) -> None:
    cfg = PublishConfig(
        apk_files_pattern="out/$FLAVOR/*.apk",
        track="${TRACK}",
        build_result="unstable",
        release_notes=(NoteConfig(language="en-GB", text="Build $N"),),
    )

    result = resolve_request(
        root=tmp_path,
        config=cfg,
        overrides=PublishOverrides(),
        env={"FLAVOR": "prod", "TRACK": "alpha", "N": "7"},
    )

    assert isinstance(result, Ok)
    req = result.value.request
    assert req.root == tmp_path
    assert req.apk_files_pattern == "out/prod/*.apk"
    assert req.release.track_name == "alpha"
    assert req.release.release_notes == (ReleaseNote("en-GB", "Build 7"),)
    assert req.build_result is BuildResult.UNSTABLE
    assert req.skip_threshold is BuildResult.UNSTABLE


def test_resolve_request_rejects_bad_build_result(tmp_path: Path) -> None:
    cfg = PublishConfig(build_result="GREEN", skip_threshold="never")

    result = resolve_request(root=tmp_path, config=cfg, overrides=PublishOverrides(), env={})

    assert isinstance(result, Err)
    assert len(result.error.messages) == 2


def test_resolve_request_defers_long_notes_to_validation(tmp_path: Path) -> None:
    cfg = PublishConfig(
        build_result="FAILURE",
        release_notes=(NoteConfig(language="en", text="x" * 600),),
    )

    result = resolve_request(root=tmp_path, config=cfg, overrides=PublishOverrides(), env={})

    assert isinstance(result, Ok)
    assert len(result.value.request.config_errors) == 1
    assert "500 characters" in result.value.request.config_errors[0]


def test_resolve_request_collects_language_warnings(tmp_path: Path) -> None:
    cfg = PublishConfig(release_notes=(NoteConfig(language="English", text="hi"),))

    result = resolve_request(root=tmp_path, config=cfg, overrides=PublishOverrides(), env={})

    assert isinstance(result, Ok)
    assert len(result.value.warnings) == 1
