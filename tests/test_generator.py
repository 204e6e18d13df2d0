"""Tests for component/hook templating, file placement and formatting."""

from __future__ import annotations

import subprocess
from pathlib import Path
from textwrap import dedent
from unittest.mock import MagicMock, patch

import pytest

from react_extractor.dependencies.types import DetectedProp
from react_extractor.generator.component import (
    component_usage,
    indent_code,
    prop_type_validator,
    render_component,
)
from react_extractor.generator.hook import hook_usage, react_imports, render_hook
from react_extractor.generator.writer import (
    InvalidNameError,
    build_generated_file,
    format_file,
    target_path,
    validate_name,
    write_generated,
)
from react_extractor.models import Category, PropType
from react_extractor.pipeline import plan_extraction


def _prop(name: str, prop_type: PropType = PropType.PRIMITIVE, inferred: str = "any") -> DetectedProp:
    return DetectedProp(name=name, type=prop_type, inferred_type=inferred)


# -----------------------------------------------------------------------
# Components
# -----------------------------------------------------------------------


class TestRenderComponent:
    """Component module text."""

    def test_typed_with_props(self):
        """TypeScript output declares a Props type and React.FC<Props>."""
        content = render_component(
            "Header",
            "<h1>{title}</h1>",
            [_prop("title"), _prop("onClose", PropType.FUNCTION, "() => void")],
            typed=True,
        )
        assert content == dedent("""\
            import React from 'react';

            type Props = {
              title: any;
              onClose: () => void;
            };

            export const Header: React.FC<Props> = ({ title, onClose }) => {
              return (
                <h1>{title}</h1>
              );
            };
        """)

    def test_untyped_with_props(self):
        """JavaScript output imports prop-types and declares validators."""
        content = render_component(
            "Toggle",
            "<button onClick={onToggle}>{label}</button>",
            [_prop("onToggle", PropType.FUNCTION, "() => void"), _prop("label")],
            typed=False,
        )
        assert "import PropTypes from 'prop-types';" in content
        assert "export const Toggle = ({ onToggle, label }) => {" in content
        assert "Toggle.propTypes = {" in content
        assert "  onToggle: PropTypes.func.isRequired," in content
        assert "  label: PropTypes.any.isRequired," in content
        assert "type Props" not in content

    def test_no_props(self):
        """Without props neither a Props type nor prop-types is emitted."""
        typed = render_component("Divider", "<hr />", [], typed=True)
        assert "export const Divider: React.FC = () => {" in typed
        untyped = render_component("Divider", "<hr />", [], typed=False)
        assert "PropTypes" not in untyped
        assert "export const Divider = () => {" in untyped

    def test_selection_reindented(self):
        """Selections are dedented and re-indented; blank lines stay empty."""
        jsx = "        <div>\n\n          <p>{text}</p>\n        </div>\n"
        assert indent_code(jsx, 4) == "    <div>\n\n      <p>{text}</p>\n    </div>"

    def test_prop_type_validators(self):
        assert prop_type_validator(_prop("flag", PropType.PRIMITIVE, "boolean")) == (
            "PropTypes.bool.isRequired"
        )
        assert prop_type_validator(_prop("user", PropType.OBJECT)) == "PropTypes.object.isRequired"
        assert prop_type_validator(_prop("rows", PropType.ARRAY)) == "PropTypes.array.isRequired"
        assert prop_type_validator(_prop("x", PropType.UNKNOWN)) == "PropTypes.any.isRequired"

    def test_usage(self):
        """Usage passes each prop through under its own name."""
        assert component_usage("Card", []) == "<Card />"
        assert component_usage("Card", [_prop("title"), _prop("user")]) == (
            "<Card title={title} user={user} />"
        )


# -----------------------------------------------------------------------
# Hooks
# -----------------------------------------------------------------------


class TestRenderHook:
    """Hook module text."""

    def test_hook_with_returns(self):
        content = render_hook(
            "useCounter", "const [count, setCount] = useState(0);", ["count", "setCount"]
        )
        assert content == dedent("""\
            import { useState } from 'react';

            export const useCounter = () => {
              const [count, setCount] = useState(0);

              return {
                count,
                setCount,
              };
            };
        """)

    def test_hook_without_imports_or_returns(self):
        """No built-in hooks means no import line; no names means an empty object."""
        content = render_hook("useLogger", "console.log(message);", [])
        assert not content.startswith("import")
        assert "  return {};" in content

    def test_imports_in_catalog_order(self):
        """Imports follow the built-in hook catalog, not source order."""
        code = "const ref = useRef(null);\nuseEffect(() => {}, []);\nconst [a] = useState(1);"
        assert react_imports(code) == ["useState", "useEffect", "useRef"]

    def test_imports_match_whole_words(self):
        assert react_imports("useStateMachine(config);") == []

    def test_usage(self):
        assert hook_usage("useTimer", []) == "useTimer();"
        assert hook_usage("useCounter", ["count", "setCount"]) == (
            "const { count, setCount } = useCounter();"
        )


# -----------------------------------------------------------------------
# Names and paths
# -----------------------------------------------------------------------


class TestNamesAndPaths:
    def test_valid_names(self):
        validate_name("UserCard", Category.COMPONENT)
        validate_name("useCounter", Category.HOOK)

    @pytest.mark.parametrize(
        ("name", "category"),
        [
            ("userCard", Category.COMPONENT),
            ("User-Card", Category.COMPONENT),
            ("counter", Category.HOOK),
            ("usecounter", Category.HOOK),
        ],
    )
    def test_invalid_names(self, name, category):
        """Components need PascalCase; hooks need use + PascalCase."""
        with pytest.raises(InvalidNameError):
            validate_name(name, category)

    def test_target_paths(self, tmp_config, tmp_path):
        """Components go under components/, hooks under hooks/, extension by typing."""
        assert target_path(tmp_path, "Card", Category.COMPONENT, typed=True, config=tmp_config) == (
            tmp_path / "components" / "Card.tsx"
        )
        assert target_path(tmp_path, "Card", Category.COMPONENT, typed=False, config=tmp_config) == (
            tmp_path / "components" / "Card.jsx"
        )
        assert target_path(tmp_path, "useX", Category.HOOK, typed=True, config=tmp_config) == (
            tmp_path / "hooks" / "useX.ts"
        )
        assert target_path(tmp_path, "useX", Category.HOOK, typed=False, config=tmp_config) == (
            tmp_path / "hooks" / "useX.js"
        )


# -----------------------------------------------------------------------
# build / write / format
# -----------------------------------------------------------------------


class TestBuildAndWrite:
    def test_build_component(self, tmp_config, tmp_path):
        """A component plan renders props into the module and the usage."""
        plan = plan_extraction("<div>{title}</div>", typed=True, config=tmp_config)
        generated = build_generated_file(plan, "Title", tmp_path, config=tmp_config)
        assert generated.category == Category.COMPONENT
        assert generated.path == str(tmp_path / "components" / "Title.tsx")
        assert "type Props = {" in generated.content
        assert generated.usage == "<Title title={title} />"
        assert generated.typed is True

    def test_build_hook(self, tmp_config, tmp_path):
        plan = plan_extraction("const [open, setOpen] = useState(false);", config=tmp_config)
        generated = build_generated_file(plan, "useOpen", tmp_path, config=tmp_config)
        assert generated.path == str(tmp_path / "hooks" / "useOpen.js")
        assert generated.usage == "const { open, setOpen } = useOpen();"

    def test_build_unknown_rejected(self, tmp_config, tmp_path):
        plan = plan_extraction("const x = 1;", config=tmp_config)
        with pytest.raises(ValueError, match="Unable to detect"):
            build_generated_file(plan, "Thing", tmp_path, config=tmp_config)

    def test_build_invalid_name(self, tmp_config, tmp_path):
        plan = plan_extraction("<div>{title}</div>", config=tmp_config)
        with pytest.raises(InvalidNameError, match="PascalCase"):
            build_generated_file(plan, "title", tmp_path, config=tmp_config)

    def test_write_creates_directories(self, tmp_config, tmp_path):
        plan = plan_extraction("<div>{title}</div>", config=tmp_config)
        generated = build_generated_file(plan, "Title", tmp_path, config=tmp_config)
        path = write_generated(generated)
        assert path.read_text(encoding="utf-8") == generated.content

    def test_write_refuses_overwrite(self, tmp_config, tmp_path):
        """Existing files are kept unless overwrite is requested."""
        plan = plan_extraction("<div>{title}</div>", config=tmp_config)
        generated = build_generated_file(plan, "Title", tmp_path, config=tmp_config)
        path = Path(generated.path)
        path.parent.mkdir(parents=True)
        path.write_text("original", encoding="utf-8")

        with pytest.raises(FileExistsError):
            write_generated(generated)
        assert path.read_text(encoding="utf-8") == "original"

        write_generated(generated, overwrite=True)
        assert path.read_text(encoding="utf-8") == generated.content


class TestFormatFile:
    """prettier/eslint invocation."""

    def test_runs_prettier_then_eslint(self, tmp_path):
        target = tmp_path / "Card.jsx"
        with patch("react_extractor.generator.writer.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=0, stderr="")
            assert format_file(target) is True

        commands = [call.args[0] for call in mock_run.call_args_list]
        assert commands == [
            ["npx", "prettier", "--write", str(target)],
            ["npx", "eslint", "--fix", str(target)],
        ]

    def test_nonzero_exit_reported(self, tmp_path):
        with patch("react_extractor.generator.writer.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=2, stderr="lint errors")
            assert format_file(tmp_path / "Card.jsx") is False

    def test_missing_npx_is_not_fatal(self, tmp_path):
        """A missing executable or a timeout is logged and reported as False."""
        with patch(
            "react_extractor.generator.writer.subprocess.run",
            side_effect=[FileNotFoundError("npx"), subprocess.TimeoutExpired("npx", 60)],
        ):
            assert format_file(tmp_path / "Card.jsx") is False
