"""Ordering of evaluated markets for display."""

from typing import List, Sequence, Tuple

from src.market_status.engine.status_descriptor import StatusDescriptor
from src.utils.exchange.market import Market


# pylint: disable=too-few-public-methods
class DisplayOrder:
    """Puts open markets first while preserving the input order otherwise."""

    @staticmethod
    def order_for_display(
        markets: Sequence[Market], descriptors: Sequence[StatusDescriptor]
    ) -> List[Tuple[Market, StatusDescriptor]]:
        """Return ``(market, descriptor)`` pairs, open ones first.

        ``sorted`` is stable and the key only splits open from not-open, so
        markets on the same side keep their relative order.
        """
        if len(markets) != len(descriptors):
            raise ValueError(
                f"Got {len(markets)} markets but {len(descriptors)} descriptors"
            )
        return sorted(
            zip(markets, descriptors), key=lambda pair: 0 if pair[1].is_open else 1
        )
