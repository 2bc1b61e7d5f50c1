"""Tests for the typeclass decorator and the is_absent capability."""

import msgspec
import pytest

from klaw_option import is_absent
from klaw_option.typeclass import TypeClass, typeclass


class TestTypeclassBasic:
    """Tests for basic typeclass functionality."""

    def test_typeclass_decorator(self):
        """@typeclass creates a TypeClass instance."""

        @typeclass
        def show(value) -> str: ...

        assert isinstance(show, TypeClass)

    def test_typeclass_preserves_name_and_doc(self):
        @typeclass
        def show(value) -> str:
            """Convert to string."""

        assert show.__name__ == 'show'
        assert show.__doc__ == 'Convert to string.'

    def test_typeclass_repr(self):
        @typeclass
        def show(value) -> str: ...

        assert repr(show) == '<typeclass show with 0 instances>'

    def test_call_without_arguments(self):
        @typeclass
        def show(value) -> str:
            return 'default'

        with pytest.raises(TypeError, match='requires at least one argument'):
            show()


class TestTypeclassDispatch:
    """Tests for registering and dispatching instances."""

    def test_default_used_without_instance(self):
        @typeclass
        def show(value) -> str:
            return 'default'

        assert show(1.5) == 'default'

    def test_exact_instance(self):
        @typeclass
        def show(value) -> str:
            return 'default'

        @show.instance(int)
        def _show_int(value: int) -> str:
            return f'int {value}'

        assert show(3) == 'int 3'
        assert show('x') == 'default'
        assert repr(show) == '<typeclass show with 1 instances>'

    def test_subclass_uses_base_instance(self):
        @typeclass
        def show(value) -> str:
            return 'default'

        @show.instance(int)
        def _show_int(value: int) -> str:
            return 'int'

        assert show(True) == 'int'
        assert show.has_instance(bool)
        assert not show.has_instance(str)

    def test_exact_instance_beats_base(self):
        @typeclass
        def show(value) -> str:
            return 'default'

        @show.instance(int)
        def _show_int(value: int) -> str:
            return 'int'

        @show.instance(bool)
        def _show_bool(value: bool) -> str:
            return 'bool'

        assert show(True) == 'bool'
        assert show(1) == 'int'


class TestIsAbsent:
    """Tests for the built-in absent representations."""

    def test_none_is_absent(self):
        assert is_absent(None)

    def test_unset_is_absent(self):
        assert is_absent(msgspec.UNSET)
        assert is_absent.has_instance(msgspec.UnsetType)

    @pytest.mark.parametrize('value', [0, '', False, [], {}, 0.0])
    def test_falsy_values_are_present(self, value):
        assert not is_absent(value)
