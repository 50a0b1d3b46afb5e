"""The fixed corpus of inputs, one per segmentation complexity class."""

from dataclasses import dataclass
from typing import Final

from .config import DEFAULT_SETTINGS, BenchmarkSettings

# Four base letters, each carrying dozens of stacked combining marks.
_ZALGO: Final[str] = "t̶̛̗͕̣̲͙̩͙̹̘̖̬̗̟̳̠̮̻̭̾̈́̐͛̐̌̀̈́̀̈́͒̈́̆̎̌̈ẽ̸̡̨̧̻̳̮̙̞̣̜̘̙̻̻̬̠̠͉̲̤͙̖̤̳̗̻̬̺͓͉̰̜̭̺͓͚̪̺̪̓̋̎͌̍͊̉͋̽̄̂͋̄̀̚͘̚͜͠͝ͅx̸̢̨̛͔͚̠̟̲̪͔̥̮̞̱͓̙̺̩̭̘͚̪͈̝̹̮̣̭̰̭̖̲͓̠̣̺̙̱̺̖͕̤͉̮̪̼̰̹̞̰͎̀̓̎̿́̔̂͊̐̽̃̐̑̆̑͒̒̈́̓͋̌̉̂̇̆̎͋́͋͘̚̚͘͜͜͝͝ͅͅt̵̛̻̮͓̱͇̟͇̪͙̩̝͈̼̫̭̝̲̹̆̈́̀͗̿̐̆͒̄̔̀͌̄͛̒͋̋͂̿̍̈́̇̕͘͘͜͝͝"


@dataclass(frozen=True)
class CorpusEntry:
    """A named benchmark input."""

    name: str
    text: str

    def __post_init__(self) -> None:
        """Validate that the entry carries text."""
        if not self.text:
            msg = f"Corpus entry '{self.name}' must not be empty."
            raise ValueError(msg)

    @property
    def code_units(self) -> int:
        """Length of the text in UTF-16 code units."""
        return len(self.text.encode("utf-16-le")) // 2


CORPUS: Final[tuple[CorpusEntry, ...]] = (
    # Baseline: one code point per cluster
    CorpusEntry(
        "ascii",
        "Hello World! This is a simple ASCII string with numbers 12345 and punctuation, "
        "long enough to exercise the long-input path.",
    ),
    # ZWJ family, skin tone modifier, regional indicator flag, VS16 heart, pictographs
    CorpusEntry(
        "emoji",
        "\U0001f468\u200d\U0001f469\u200d\U0001f467\u200d\U0001f466 \U0001f44b\U0001f3fd \U0001f1fa\U0001f1f8 "
        "\u2764\ufe0f \U0001f600 \U0001f389 \u2728 \U0001f680 \U0001f4bb \U0001f4f1",
    ),
    CorpusEntry("mixed", "Hello \U0001f44b World \U0001f30d! Mixed ASCII and emoji \U0001f60a with numbers 123."),
    CorpusEntry("korean", "안녕하세요 세계! 한국어 문자열입니다."),
    CorpusEntry(
        "complex",
        "Test with combining chars: e\u0301 e\u0300 e\u0302 e\u0308 a\u0300 a\u0302 a\u0308 and zalgo " + _ZALGO,
    ),
    CorpusEntry("longAscii", "A" * 1000),
    CorpusEntry("longEmoji", "\U0001f600" * 1000),
)

CACHE_PROBE_TEXT: Final[str] = "Hello \U0001f44b World \U0001f30d!"


def select_iterations(entry: CorpusEntry, settings: BenchmarkSettings = DEFAULT_SETTINGS) -> int:
    """
    Choose how many measured calls an entry gets.

    Short inputs get more calls so their timings are stable; long inputs get
    fewer to keep the whole run bounded.

    Args:
        entry: The corpus entry about to be benchmarked.
        settings: The protocol constants.

    Returns:
        The measured iteration count for the entry.

    """
    if entry.code_units <= settings.long_input_threshold:
        return settings.default_iterations
    return settings.long_input_iterations
