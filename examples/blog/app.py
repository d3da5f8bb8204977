"""Blog — two resources served from in-memory records.

Demonstrates conventional routes (``index``, ``new``, ``show``), a custom
route with a ``params`` handler, async record handlers, and resources
tried in order until one of them matches.

Run with any ASGI server:
    uvicorn app:app
"""

from dataclasses import dataclass, field
from pathlib import Path

from raptor import App, AppConfig, routes

VIEWS_DIR = Path(__file__).parent / "views"

# ---------------------------------------------------------------------------
# Post — records, presenters, and a route table
# ---------------------------------------------------------------------------


class Post:
    class Record:
        store: dict[int, "Post.Record"] = {}

        def __init__(self, params):
            self.id = 0
            self.title = params.get("title", "")
            self.body = params.get("body", "")
            self.author_id = int(params.get("author_id", 1))

        @classmethod
        def create(cls, id, **fields):
            record = cls(fields)
            record.id = id
            cls.store[id] = record
            return record

        @classmethod
        def find_by_id(cls, id):
            return cls.store[id]

        @classmethod
        def all(cls):
            return sorted(cls.store.values(), key=lambda r: r.id)

        @classmethod
        def search(cls, params):
            term = params.get("q", "").lower()
            return [r for r in cls.all() if term in r.title.lower()]

    class PresentsOne:
        def __init__(self, record):
            self.id = record.id
            self.title = record.title or "Untitled"
            self.body = record.body

        @property
        def is_draft(self):
            return self.id == 0

    class PresentsMany:
        def __init__(self, records):
            self.posts = [Post.PresentsOne(r) for r in records]

        @property
        def count(self):
            return len(self.posts)


# Custom routes must come before `show`, or ":id" would claim "/post/search".
Post.Routes = routes(Post, "index", "new")
Post.Routes.route("/post/search", Post.Record.search, "index")
Post.Routes.show()

# ---------------------------------------------------------------------------
# Author — async record handlers work the same as sync ones
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class AuthorRecord:
    id: int
    name: str
    post_ids: tuple[int, ...] = field(default=())


class Author:
    class Record:
        store: dict[int, AuthorRecord] = {}

        @classmethod
        async def find_by_id(cls, id):
            return cls.store[id]

        @classmethod
        async def all(cls):
            return list(cls.store.values())

    class PresentsOne:
        def __init__(self, record):
            self.name = record.name
            self.post_count = len(record.post_ids)

    class PresentsMany:
        def __init__(self, records):
            self.names = [r.name for r in records]


Author.Routes = routes(Author, "index", "show")

# ---------------------------------------------------------------------------
# Seed data and app
# ---------------------------------------------------------------------------

Post.Record.store.clear()
Author.Record.store.clear()
Post.Record.create(1, title="Hello, raptor", body="Routes from conventions.")
Post.Record.create(2, title="Presenters", body="Templates see presenter members.")
Author.Record.store[1] = AuthorRecord(1, "Ada", (1, 2))

app = App([Post, Author], AppConfig(template_dir=VIEWS_DIR))
