from collections import defaultdict
from typing import Dict, List, Optional

from structlog.stdlib import BoundLogger

from domain.entities import ChatTurn, ContentItem, FetchOutcome
from domain.interfaces import IContentService

HOME_CATEGORY = "home"
CATEGORY_SLOT = "category"
SEARCH_SLOT = "search"


class RequestFence:
    """Per-slot request sequence numbers.

    Each fetch takes a ticket from ``issue``; when it completes its result is
    only applied if the ticket is still the latest one issued for that slot.
    """

    def __init__(self):
        self._latest: Dict[str, int] = defaultdict(int)

    def issue(self, slot: str) -> int:
        self._latest[slot] += 1
        return self._latest[slot]

    def is_latest(self, slot: str, seq: int) -> bool:
        return self._latest[slot] == seq


class BrowseSession:
    """UI-side state for one visitor: visible row, hero, search, favorites, history and chat log."""

    def __init__(self, content: IContentService, logger: BoundLogger, fence: Optional[RequestFence] = None):
        self.content = content
        self.logger = logger
        self.fence = fence or RequestFence()
        self.category: Optional[str] = None
        self.category_items: List[ContentItem] = []
        self.search_query: Optional[str] = None
        self.search_items: List[ContentItem] = []
        self.hero: Optional[ContentItem] = None
        self.favorites: List[ContentItem] = []
        self.watch_history: List[ContentItem] = []
        self.chat_history: List[ChatTurn] = []

    async def load_home(self) -> bool:
        return await self.show_category(HOME_CATEGORY)

    async def show_category(self, category: str) -> bool:
        """Switch the visible row; the previous row and hero stay when nothing comes back."""
        self.category = category
        self.search_query = None
        self.search_items = []

        seq = self.fence.issue(CATEGORY_SLOT)
        if category == HOME_CATEGORY:
            outcome = await self.content.fetch_trending_outcome()
        else:
            outcome = await self.content.fetch_category_outcome(category)
        if not self._accept(CATEGORY_SLOT, seq, outcome):
            return False
        if outcome.items:
            self.category_items = outcome.items
            self.hero = outcome.items[0]
        return True

    async def run_search(self, query: str) -> bool:
        if not query.strip():
            return False
        seq = self.fence.issue(SEARCH_SLOT)
        outcome = await self.content.search_outcome(query)
        if not self._accept(SEARCH_SLOT, seq, outcome):
            return False
        self.search_query = query
        self.search_items = outcome.items
        return True

    def toggle_favorite(self, item: ContentItem) -> bool:
        """Add or remove ``item`` by id. Returns True when it is now a favorite."""
        if self.is_favorite(item.id):
            self.favorites = [m for m in self.favorites if m.id != item.id]
            return False
        self.favorites.append(item)
        return True

    def is_favorite(self, item_id: int) -> bool:
        return any(m.id == item_id for m in self.favorites)

    def play(self, item: Optional[ContentItem] = None) -> Optional[ContentItem]:
        # Most recent first, one entry per id.
        item = item or self.hero
        if item is None:
            return None
        self.watch_history = [item] + [m for m in self.watch_history if m.id != item.id]
        self.logger.info("Now playing", item_id=item.id, title=item.title)
        return item

    async def send_message(self, text: str) -> Optional[ChatTurn]:
        if not text.strip():
            return None
        prior = list(self.chat_history)
        self.chat_history.append(ChatTurn(role="user", text=text))
        reply = await self.content.chat(prior, text)
        turn = ChatTurn(role="assistant", text=reply)
        self.chat_history.append(turn)
        return turn

    def _accept(self, slot: str, seq: int, outcome: FetchOutcome) -> bool:
        if not self.fence.is_latest(slot, seq):
            self.logger.debug("Discarding stale result", slot=slot, seq=seq, items=len(outcome.items))
            return False
        if outcome.failed:
            self.logger.warning("Content unavailable", slot=slot, error=outcome.error)
        return True
