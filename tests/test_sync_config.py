import pytest

from docsync.logger import ConfigurationError
from docsync.sync_core.config import SyncConfig, default_config, load_config


@pytest.mark.unit
def test_load_config_defaults(tmp_path):
    cfg = load_config(source_root=tmp_path, env={})

    assert cfg.source_root == tmp_path.resolve()
    assert cfg.target_root == tmp_path.resolve() / "docs"
    assert cfg.include_extensions == (".md", ".mdx")
    assert "node_modules" in cfg.exclude_dirs
    assert "README.md" in cfg.exclude_files
    assert cfg.add_frontmatter and cfg.create_index_files
    assert cfg.debounce_secs == 1.0
    assert cfg.manifest_path == tmp_path.resolve() / "sidebars.js"


@pytest.mark.unit
def test_load_config_env_overrides(tmp_path):
    env = {
        "DOCSYNC_SOURCE_ROOT": str(tmp_path),
        "DOCSYNC_TARGET_DIR": "website/content",
        "DOCSYNC_EXCLUDE_DIRS": "drafts, archive",
        "DOCSYNC_EXCLUDE_FILES": "TODO.md",
        "DOCSYNC_EXTENSIONS": "md,markdown",
        "DOCSYNC_ADD_FRONTMATTER": "0",
        "DOCSYNC_CREATE_INDEX": "false",
        "DOCSYNC_DEBOUNCE_SECS": "0.25",
        "DOCSYNC_USE_POLLING": "yes",
    }
    cfg = load_config(env=env)

    assert cfg.target_root == tmp_path.resolve() / "website" / "content"
    assert {"drafts", "archive", "node_modules"} <= cfg.exclude_dirs
    assert "TODO.md" in cfg.exclude_files
    assert cfg.include_extensions == (".md", ".markdown")
    assert not cfg.add_frontmatter
    assert not cfg.create_index_files
    assert cfg.debounce_secs == 0.25
    assert cfg.use_polling


@pytest.mark.unit
def test_default_excludes_can_be_disabled(tmp_path):
    cfg = load_config(source_root=tmp_path, env={"DOCSYNC_DEFAULT_EXCLUDES": "0"})

    assert cfg.exclude_dirs == frozenset()
    assert cfg.exclude_files == frozenset()


@pytest.mark.unit
def test_explicit_arguments_beat_environment(tmp_path):
    env = {"DOCSYNC_TARGET_DIR": "from-env", "DOCSYNC_DEBOUNCE_SECS": "5"}
    cfg = load_config(source_root=tmp_path, target_root="from-arg", env=env, debounce_secs=0.1)

    assert cfg.target_root.name == "from-arg"
    assert cfg.debounce_secs == 0.1


@pytest.mark.unit
def test_bad_debounce_is_a_configuration_error(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(source_root=tmp_path, env={"DOCSYNC_DEBOUNCE_SECS": "soon"})
    with pytest.raises(ConfigurationError):
        SyncConfig(source_root=tmp_path, target_root=tmp_path / "docs", debounce_secs=-1)


@pytest.mark.unit
def test_config_is_immutable(tmp_path):
    cfg = default_config(tmp_path)
    with pytest.raises(AttributeError):
        cfg.add_frontmatter = False  # type: ignore[misc]


@pytest.mark.unit
def test_invalid_manifest_name_rejected(tmp_path):
    with pytest.raises(ConfigurationError):
        SyncConfig(source_root=tmp_path, target_root=tmp_path / "docs", manifest_name="a/b.js")


@pytest.mark.unit
def test_unknown_flag_spelling_keeps_default(tmp_path, caplog):
    env = {"DOCSYNC_ADD_FRONTMATTER": "sometimes", "DOCSYNC_USE_POLLING": "OFF"}
    cfg = load_config(source_root=tmp_path, env=env)

    assert cfg.add_frontmatter is True
    assert cfg.use_polling is False
    assert "DOCSYNC_ADD_FRONTMATTER" in caplog.text
