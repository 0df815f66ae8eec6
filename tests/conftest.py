import pytest

from intake_bot.bots.applications.events import EnterApplication, Other, Sender, Start, Text
from intake_bot.bots.applications.flow import ApplicationFlow, Markup
from intake_bot.database.db import SubmissionStore
from intake_bot.services.conversation import ConversationTracker
from intake_bot.services.rate_limiter import RateLimiter

ALICE = Sender(user_id=101, username="alice")


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeResponder:
    def __init__(self, edit_result: bool = True):
        self.edit_result = edit_result
        self.replies = []
        self.edits = []
        self.forwards = []
        self.acknowledged = 0

    async def reply(self, text, markup=Markup.NONE):
        self.replies.append((text, markup))

    async def edit(self, text):
        self.edits.append(text)
        return self.edit_result

    async def acknowledge(self):
        self.acknowledged += 1

    async def forward(self, chat_id, text):
        self.forwards.append((chat_id, text))

    @property
    def last_text(self):
        return self.replies[-1][0]


def start(sender=ALICE, chat_type="private"):
    return Start(sender=sender, chat_type=chat_type)


def enter(sender=ALICE, chat_type="private", via_callback=False):
    return EnterApplication(sender=sender, chat_type=chat_type, via_callback=via_callback)


def text(body, sender=ALICE, chat_type="private"):
    return Text(sender=sender, chat_type=chat_type, body=body)


def other(sender=ALICE, chat_type="private", via_callback=False):
    return Other(sender=sender, chat_type=chat_type, via_callback=via_callback)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(tmp_path):
    store = SubmissionStore(tmp_path / "data" / "applications.db")
    store.initialize_schema()
    return store


@pytest.fixture
def tracker():
    return ConversationTracker()


@pytest.fixture
def limiter(clock):
    return RateLimiter(cooldown_seconds=60, clock=clock)


@pytest.fixture
def flow(tracker, limiter, store):
    return ApplicationFlow(tracker, limiter, store, forward_chat_id="-100500")


@pytest.fixture
def responder():
    return FakeResponder()
