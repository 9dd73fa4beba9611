"""Score a rock-paper-scissors strategy guide.

Each line of the guide holds the opponent's play (A, B or C) and a second token (X, Y or Z).
Under the first rule set the second token is the play we make; under the second it is the
outcome we want, and our play has to be worked out from it. Either way a round scores the
value of our play (rock 1, paper 2, scissors 3) plus the value of the outcome (loss 0, draw 3,
win 6), and the guide scores the sum of its rounds.

Blank lines are skipped. Any other line must be exactly two tokens separated by a single space;
the first bad line aborts the whole parse.
"""
from enum import IntEnum
from itertools import chain, cycle, islice, starmap
from typing import IO, Callable, Dict, NamedTuple, Optional, Tuple, Union

from .util import numbered_lines, print_, set_verbose


class Outcome(IntEnum):
    loss = 0
    draw = 3
    win = 6


class Action(IntEnum):
    rock = 1
    paper = 2
    scissors = 3


# play -> the play that beats it
WIN_RELATION: Dict[Action, Action] = dict(zip(Action, islice(chain(Action, Action), 1, 4)))
# play -> the play that loses to it
LOSE_RELATION: Dict[Action, Action] = {q: p for p, q in WIN_RELATION.items()}
ACTION_MAPPING: Dict[str, Action] = dict(zip("ABCXYZ", cycle(Action)))
OUTCOME_MAPPING: Dict[str, Outcome] = dict(zip("XYZ", Outcome))

SEPARATOR = " "


# Errors


class StrategyGuideError(ValueError):
    kind = "invalid strategy guide"

    def __init__(self, text: str, line_no: Optional[int] = None):
        super().__init__(text, line_no)
        self.text = text
        self.line_no = line_no

    def at_line(self, line_no: int) -> "StrategyGuideError":
        return type(self)(self.text, line_no)

    def __str__(self):
        location = "" if self.line_no is None else f" on line {self.line_no}"
        return f"{self.kind}{location}: {self.text!r}"


class UnrecognizedActionToken(StrategyGuideError):
    kind = "unrecognized action token"


class UnrecognizedOutcomeToken(StrategyGuideError):
    kind = "unrecognized outcome token"


class MalformedLine(StrategyGuideError):
    kind = "expected exactly 2 tokens"


# Rules


def resolve_outcome(our_play: Action, their_play: Action) -> Outcome:
    if our_play == their_play:
        return Outcome.draw
    elif WIN_RELATION[their_play] == our_play:
        return Outcome.win
    else:
        return Outcome.loss


def resolve_action(their_play: Action, outcome: Outcome) -> Action:
    if outcome == Outcome.draw:
        return their_play
    elif outcome == Outcome.win:
        return WIN_RELATION[their_play]
    else:
        return LOSE_RELATION[their_play]


# Parsing


def decode_action(token: str) -> Action:
    action = ACTION_MAPPING.get(token)
    if action is None:
        raise UnrecognizedActionToken(token)
    return action


def decode_outcome(token: str) -> Outcome:
    outcome = OUTCOME_MAPPING.get(token)
    if outcome is None:
        raise UnrecognizedOutcomeToken(token)
    return outcome


def split_line(line: str) -> Tuple[str, str]:
    tokens = line.split(SEPARATOR)
    if len(tokens) != 2:
        raise MalformedLine(line)
    first, second = tokens
    return first, second


# Action and Outcome are both IntEnums, so rounds of either kind compare equal as int pairs
class PlayRound(NamedTuple):
    their_play: Action
    our_play: Action


class OutcomeRound(NamedTuple):
    their_play: Action
    outcome: Outcome


Round = Union[PlayRound, OutcomeRound]
Guide = Tuple[Round, ...]


def parse_play_round(line: str) -> PlayRound:
    their_play, our_play = split_line(line)
    return PlayRound(decode_action(their_play), decode_action(our_play))


def parse_outcome_round(line: str) -> OutcomeRound:
    their_play, outcome = split_line(line)
    return OutcomeRound(decode_action(their_play), decode_outcome(outcome))


# Scoring


def score_play_round(their_play: Action, our_play: Action) -> int:
    return our_play + resolve_outcome(our_play, their_play)


def score_outcome_round(their_play: Action, outcome: Outcome) -> int:
    return resolve_action(their_play, outcome) + outcome


class RuleSet(IntEnum):
    play = 1
    outcome = 2


class Rules(NamedTuple):
    parse: Callable[[str], Round]
    score: Callable[..., int]
    description: str


RULES: Dict[RuleSet, Rules] = {
    RuleSet.play: Rules(
        parse_play_round, score_play_round, "the second column is the play we make"
    ),
    RuleSet.outcome: Rules(
        parse_outcome_round, score_outcome_round, "the second column is the outcome we want"
    ),
}


def parse_guide(text: str, rule_set: RuleSet) -> Guide:
    parse = RULES[rule_set].parse
    rounds = []
    for line_no, line in numbered_lines(text.splitlines()):
        try:
            rounds.append(parse(line))
        except StrategyGuideError as e:
            raise e.at_line(line_no) from e
    return tuple(rounds)


def total_score(guide: Guide, rule_set: RuleSet) -> int:
    scores = list(starmap(RULES[rule_set].score, guide))
    print_(f"Round scores: {scores}")
    return sum(scores)


def run(input_: IO[str], part_2: bool = False, verbose: bool = False) -> int:
    set_verbose(verbose)
    rule_set = RuleSet.outcome if part_2 else RuleSet.play
    print_(f"Scoring with rule set {rule_set.value}: {RULES[rule_set].description}")
    guide = parse_guide(input_.read(), rule_set)
    print_(f"Parsed {len(guide)} rounds")
    return total_score(guide, rule_set)


test_input = """
A Y
B X
C Z""".strip()


def test():
    import io

    guide = parse_guide(test_input, RuleSet.play)
    expected_guide: Guide = (
        PlayRound(Action.rock, Action.paper),
        PlayRound(Action.paper, Action.rock),
        PlayRound(Action.scissors, Action.scissors),
    )
    assert guide == expected_guide, (guide, expected_guide)

    guide = parse_guide(test_input, RuleSet.outcome)
    expected_guide = (
        OutcomeRound(Action.rock, Outcome.draw),
        OutcomeRound(Action.paper, Outcome.loss),
        OutcomeRound(Action.scissors, Outcome.win),
    )
    assert guide == expected_guide, (guide, expected_guide)

    for part_2, expected in [(False, 15), (True, 12)]:
        result = run(io.StringIO(test_input), part_2=part_2)
        assert result == expected, (part_2, result, expected)
        result = run(io.StringIO(""), part_2=part_2)
        assert result == 0, (part_2, result)
