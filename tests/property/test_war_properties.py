"""Property-based tests for the War engine."""

import random

from hypothesis import given, settings, strategies as st
from wardeck.rules.ranking import LEGACY_RANKS, compare_cards
from wardeck.rules.schema import Rank, RankOrder, Suit
from wardeck.simulation.deck import DECK_SIZE, Deck, generate_deck
from wardeck.simulation.engine import play_war_game
from wardeck.simulation.events import GameOver, RecordingListener
from wardeck.simulation.state import Card
from wardeck.simulation.war import is_war


player_lists = st.lists(
    st.text(alphabet="abcdefgh", min_size=1, max_size=6),
    min_size=1,
    max_size=6,
)


@given(seed=st.integers(min_value=0, max_value=2**32 - 1))
def test_shuffle_is_permutation_property(seed: int) -> None:
    """Property: shuffling never adds, drops or duplicates cards."""
    deck = Deck(generate_deck())
    deck.shuffle(random.Random(seed))

    assert sorted(c.card_id for c in deck.cards()) == list(range(DECK_SIZE))


@given(size=st.integers(min_value=0, max_value=DECK_SIZE))
def test_deal_until_empty_property(size: int) -> None:
    """Property: a deck of n cards deals exactly n cards."""
    deck = Deck(generate_deck()[:size])
    dealt = []
    while deck.count:
        dealt.append(deck.deal_card())

    assert len(dealt) == size


@settings(max_examples=50)
@given(names=player_lists, seed=st.integers(min_value=0, max_value=10000))
def test_game_terminates_property(names: list[str], seed: int) -> None:
    """Property: every game ends within one turn per card plus one."""
    recorder = RecordingListener()

    result = play_war_game(names, seed=seed, listener=recorder)

    assert result.turn_count <= DECK_SIZE + 1
    assert recorder.of_type(GameOver) == [GameOver(result.reason)]


@settings(max_examples=50)
@given(
    names=player_lists,
    seed=st.integers(min_value=0, max_value=10000),
    order=st.sampled_from(list(RankOrder)),
)
def test_cards_accounted_for_property(names: list[str], seed: int, order: RankOrder) -> None:
    """Property: all 52 card ids are in some zone after every turn."""
    result = play_war_game(names, seed=seed, rank_order=order)
    expected = set(range(DECK_SIZE))

    for state in result.history:
        assert state.accounted_card_ids() == expected


@settings(max_examples=30)
@given(names=player_lists, seed=st.integers(min_value=0, max_value=10000))
def test_deck_never_grows_property(names: list[str], seed: int) -> None:
    """Property: the deck shrinks monotonically."""
    result = play_war_game(names, seed=seed)
    sizes = [len(s.deck) for s in result.history]

    assert sizes == sorted(sizes, reverse=True)


@given(
    rank=st.sampled_from(list(Rank)),
    other=st.sampled_from(list(Rank)),
    pile_size=st.integers(min_value=1, max_value=4),
)
def test_war_trigger_is_exact_property(rank: Rank, other: Rank, pile_size: int) -> None:
    """Property: war iff the dealt rank equals the shared pile rank."""
    suits = list(Suit)
    pile = [Card(rank, suits[i % 4], i) for i in range(pile_size)]
    dealt = Card(other, Suit.CLUBS, 99)

    assert is_war(dealt, pile) == (other == rank)


@given(first=st.sampled_from(list(Rank)), second=st.sampled_from(list(Rank)))
def test_legacy_comparison_property(first: Rank, second: Rank) -> None:
    """Property: listed ranks order by table; unlisted ranks lose or tie."""
    a = Card(first, Suit.HEARTS, 0)
    b = Card(second, Suit.SPADES, 1)
    result = compare_cards(a, b)

    if first in LEGACY_RANKS and second in LEGACY_RANKS:
        assert (result > 0) == (LEGACY_RANKS.index(first) > LEGACY_RANKS.index(second))
    elif first not in LEGACY_RANKS and second not in LEGACY_RANKS:
        assert result == 0
    elif first not in LEGACY_RANKS:
        assert result < 0
    else:
        assert result > 0
