"""
Transcript Splitter Module
==========================
Main interface for transcript re-partitioning.

The TranscriptSplitter dispatches a segment sequence to the strategy named
by the options' mode. An unknown or missing mode is not an error: the input
is returned unchanged.
"""

from typing import List, Optional, Dict, Any, Sequence

from .strategies import (
    SplitStrategy,
    SentenceSplitStrategy,
    TimeBatchStrategy,
    CharacterBatchStrategy,
    SemanticStrategy,
)
from ..models import TranscriptSegment, SplitMode, SplitOptions
from ..config import SplitConfig, get_config
from ..logging_config import get_split_logger, log_split_decision

logger = get_split_logger("segmentation")


# Strategy registry
STRATEGY_REGISTRY = {
    SplitMode.SENTENCE: SentenceSplitStrategy,
    SplitMode.TIME: TimeBatchStrategy,
    SplitMode.CHARACTER: CharacterBatchStrategy,
    SplitMode.SEMANTIC: SemanticStrategy,
}


class TranscriptSplitter:
    """
    Main class for transcript splitting.

    Provides a unified interface for:
    - Selecting a strategy from a mode
    - Falling back to configured defaults for missing options
    - Logging split decisions

    Usage:
        splitter = TranscriptSplitter()
        segments = splitter.split(segments, SplitOptions(mode=SplitMode.TIME))

        # Or with defaults taken from configuration
        splitter = TranscriptSplitter(config=SplitConfig(mode="character"))
        segments = splitter.split(segments)
    """

    def __init__(self, config: Optional[SplitConfig] = None):
        """
        Initialize the transcript splitter.

        Args:
            config: Split configuration supplying default options
                (default: from global config)
        """
        self.config = config or get_config().splitting
        self.default_options = SplitOptions.from_config(self.config)
        self._strategies: Dict[SplitMode, SplitStrategy] = {
            mode: strategy_cls() for mode, strategy_cls in STRATEGY_REGISTRY.items()
        }

    def get_strategy(self, mode: Any) -> Optional[SplitStrategy]:
        """Return the strategy for a mode, or None if the mode is unknown."""
        parsed = SplitMode.parse(mode)
        if parsed is None:
            return None
        return self._strategies[parsed]

    def split(
        self,
        segments: Sequence[TranscriptSegment],
        options: Optional[SplitOptions] = None
    ) -> List[TranscriptSegment]:
        """
        Split segments with the strategy selected by options.mode.

        Args:
            segments: Ordered transcript segments
            options: Split options (default: from configuration); a plain
                dictionary is parsed with SplitOptions.from_dict

        Returns:
            New list of segments; a copy of the input when the mode is unknown
        """
        if isinstance(options, dict):
            options = SplitOptions.from_dict(options)
        options = options or self.default_options
        strategy = self.get_strategy(options.mode)

        if strategy is None:
            logger.warning(
                "Unknown split mode, returning segments unchanged",
                extra={'mode': str(options.mode), 'segment_count': len(segments)}
            )
            return list(segments)

        result = strategy.split(segments, options)

        log_split_decision(
            "split_complete",
            {
                'mode': strategy.name,
                'input_count': len(segments),
                'output_count': len(result),
                'options': options.to_dict(),
            }
        )

        return result

    def get_strategy_info(self) -> List[Dict[str, Any]]:
        """Describe the available strategies."""
        return [
            {
                'mode': mode.value,
                'name': strategy.name,
                'description': strategy.description,
            }
            for mode, strategy in self._strategies.items()
        ]


def split_segments(
    segments: Sequence[TranscriptSegment],
    options: SplitOptions
) -> List[TranscriptSegment]:
    """
    Convenience function to split a segment sequence.

    Args:
        segments: Ordered transcript segments
        options: Split options; mode selects the strategy

    Returns:
        New ordered list of segments
    """
    return TranscriptSplitter().split(segments, options)
