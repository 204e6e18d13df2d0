"""Tests for Config and the settings it feeds into detection and placement."""

from pathlib import Path

from react_extractor.config import Config
from react_extractor.detection.engine import DetectionEngine
from react_extractor.generator.writer import target_path
from react_extractor.models import Category


class TestConfigDefaults:
    def test_state_lives_under_home(self):
        config = Config()
        assert config.base_dir == Path.home() / ".react-extractor"
        assert config.log_dir.parent == config.base_dir

    def test_generation_defaults(self):
        """Four-space components, two-space hooks, no formatter run."""
        config = Config()
        assert (config.components_dir_name, config.hooks_dir_name) == ("components", "hooks")
        assert config.component_indent == 4
        assert config.hook_indent == 2
        assert config.format_generated is False


class TestConfigDrivesBehaviour:
    """Overrides reach the engine and the writer."""

    def test_hook_normalizer(self):
        """A single minor hook saturates when the normalizer is lowered."""
        assert DetectionEngine().analyze("useRef(null);").confidence == 1 / 3
        engine = DetectionEngine(Config(hook_normalizer=1.0))
        assert engine.analyze("useRef(null);").confidence == 1.0

    def test_min_extraction_confidence(self):
        """A lone plain tag sits on the default cutoff and clears a lower one."""
        assert not DetectionEngine().is_extraction_worthy("<br />")
        assert DetectionEngine(Config(min_extraction_confidence=0.1)).is_extraction_worthy("<br />")

    def test_output_dir_names(self, tmp_path):
        config = Config(components_dir_name="ui", hooks_dir_name="logic")
        assert target_path(tmp_path, "Card", Category.COMPONENT, typed=True, config=config) == (
            tmp_path / "ui" / "Card.tsx"
        )
        assert target_path(tmp_path, "useCard", Category.HOOK, typed=False, config=config) == (
            tmp_path / "logic" / "useCard.js"
        )

    def test_ensure_dirs_is_idempotent(self, tmp_path):
        config = Config(base_dir=tmp_path / "state")
        config.ensure_dirs()
        config.ensure_dirs()
        assert config.log_dir.is_dir()
