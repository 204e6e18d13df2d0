"""Tests for default component and hook names."""

from __future__ import annotations

from textwrap import dedent

from react_extractor.detection.engine import DetectionEngine
from react_extractor.detection.naming import (
    DEFAULT_COMPONENT_NAME,
    DEFAULT_HOOK_NAME,
    suggest_component_name,
    suggest_hook_name,
    suggest_name,
)


def _component_name(code: str) -> str:
    return suggest_component_name(code, DetectionEngine().analyze(code))


class TestComponentNames:
    def test_nested_component_wrapper(self):
        """First capitalized tag inside a JSX match becomes <Tag>Wrapper."""
        assert _component_name("<section><Avatar src={src} /></section>") == "AvatarWrapper"

    def test_form(self):
        assert _component_name("<form onSubmit={submit}><button>Go</button></form>") == "CustomForm"

    def test_input(self):
        assert _component_name('<input value={value} />') == "CustomInput"

    def test_button_before_div(self):
        """Element names are checked in a fixed order: form, input, button, div."""
        assert _component_name("<div><button>Save</button></div>") == "CustomButton"

    def test_div(self):
        assert _component_name("<div>{title}</div>") == "CustomDiv"

    def test_default(self):
        assert _component_name("<span>{label}</span>") == DEFAULT_COMPONENT_NAME


class TestHookNames:
    def test_state_variable(self):
        """The first array-destructured name wins."""
        assert suggest_hook_name("const [count, setCount] = useState(0);") == "useCount"

    def test_state_variable_camel_case(self):
        code = "const [isVisible, setIsVisible] = useState(false);"
        assert suggest_hook_name(code) == "useIsVisible"

    def test_return_identifier(self):
        """Without destructuring, the returned identifier names the hook."""
        code = dedent("""\
            const data = useFetch(url);
            return data;
        """)
        assert suggest_hook_name(code) == "useData"

    def test_return_keyword_skipped(self):
        """Keyword returns fall through to the function name."""
        code = "function fetchUser() { return null; }"
        assert suggest_hook_name(code) == "useFetchUser"

    def test_existing_hook_name_kept(self):
        assert suggest_hook_name("function useThing() { useRef(null); }") == "useThing"

    def test_lowercase_use_prefix_is_capitalized(self):
        """Only use + capital counts as an existing hook name."""
        assert suggest_hook_name("const [user, setUser] = useState(null);") == "useUser"

    def test_default(self):
        assert suggest_hook_name("useEffect(() => {});") == DEFAULT_HOOK_NAME


class TestSuggestName:
    def test_dispatches_by_category(self):
        engine = DetectionEngine()
        hook = "const [open, setOpen] = useState(false);"
        assert suggest_name(hook, engine.analyze(hook)) == "useOpen"
        assert suggest_name("<div/>", engine.analyze("<div/>")) == "CustomDiv"

    def test_unknown_is_none(self):
        code = "const x = 1;"
        assert suggest_name(code, DetectionEngine().analyze(code)) is None
