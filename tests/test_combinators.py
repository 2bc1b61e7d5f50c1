"""Tests for and_all() and and_all_lazy()."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from klaw_option import Nothing, Some, and_all, and_all_lazy, some
from tests.strategies import int_options

# (arity, index of the first producer returning Nothing)
FAILING_POSITIONS = [(arity, k) for arity in range(2, 9) for k in range(arity)]


class TestAndAll:
    """Tests for and_all over already-built options."""

    def test_two_somes(self):
        """Two Somes combine into Some of a pair."""
        assert and_all(some(12), some(True)) == Some((12, True))

    def test_any_nothing(self):
        """A Nothing on either side gives Nothing."""
        assert and_all(some(12), Nothing) is Nothing
        assert and_all(Nothing, some(True)) is Nothing

    @pytest.mark.parametrize('arity', range(2, 9))
    def test_every_arity(self, arity: int):
        """Every supported arity combines into a tuple in argument order."""
        opts = [some(i) for i in range(arity)]
        assert and_all(*opts) == Some(tuple(range(arity)))

    @pytest.mark.parametrize(('arity', 'k'), FAILING_POSITIONS)
    def test_nothing_at_any_position(self, arity: int, k: int):
        """A single Nothing anywhere makes the result Nothing."""
        opts = [some(i) for i in range(arity)]
        opts[k] = Nothing
        assert and_all(*opts) is Nothing

    @pytest.mark.parametrize('count', [0, 1, 9])
    def test_unsupported_arity_raises(self, count: int):
        """Fewer than two or more than eight options is a TypeError."""
        with pytest.raises(TypeError, match='takes 2 to 8 arguments'):
            and_all(*[some(i) for i in range(count)])

    @given(st.lists(int_options, min_size=2, max_size=8))
    def test_some_iff_all_some(self, opts):
        """The result is Some exactly when every input is Some."""
        result = and_all(*opts)
        assert result.is_some() == all(opt.is_some() for opt in opts)
        if result.is_some():
            assert result.unwrap() == tuple(opt.unwrap() for opt in opts)


class TestAndAllLazy:
    """Tests for and_all_lazy's left-to-right short-circuit."""

    def test_all_producers_called_in_order(self, calls):
        """With no Nothing, every producer runs once, left to right."""

        def producer(i):
            def produce():
                calls.append(i)
                return some(i)

            return produce

        result = and_all_lazy(producer(0), producer(1), producer(2))
        assert result == Some((0, 1, 2))
        assert calls == [0, 1, 2]

    def test_middle_nothing_skips_the_rest(self, calls):
        """Producer 2 of 3 returns Nothing, so producer 3 is never called."""

        def first():
            calls.append('first')
            return some(1)

        def second():
            calls.append('second')
            return Nothing

        def third():
            calls.append('third')
            return some(3)

        assert and_all_lazy(first, second, third) is Nothing
        assert calls == ['first', 'second']

    @pytest.mark.parametrize(('arity', 'k'), FAILING_POSITIONS)
    def test_stops_at_failing_position(self, calls, arity: int, k: int):
        """Producers up to and including the first Nothing run; later ones do not."""

        def producer(i):
            def produce():
                calls.append(i)
                return Nothing if i == k else some(i)

            return produce

        assert and_all_lazy(*[producer(i) for i in range(arity)]) is Nothing
        assert calls == list(range(k + 1))

    def test_later_producer_sees_earlier_side_effects(self):
        """Producers run in order, so later ones may depend on earlier ones."""
        state = {}

        def first():
            state['user'] = 'ada'
            return some(1)

        def second():
            return some(state['user'])

        assert and_all_lazy(first, second) == Some((1, 'ada'))

    @pytest.mark.parametrize('arity', range(2, 9))
    def test_every_arity(self, arity: int):
        """Every supported arity combines into a tuple in argument order."""
        producers = [lambda i=i: some(i) for i in range(arity)]
        assert and_all_lazy(*producers) == Some(tuple(range(arity)))

    @pytest.mark.parametrize('count', [1, 9])
    def test_unsupported_arity_raises(self, count: int):
        """The error names the function that was misused."""
        with pytest.raises(TypeError, match='and_all_lazy'):
            and_all_lazy(*[lambda: some(1)] * count)

    def test_arity_checked_before_any_call(self, calls):
        """A bad arity is rejected before any producer runs."""
        with pytest.raises(TypeError):
            and_all_lazy(lambda: calls.append('called') or some(1))
        assert calls == []
