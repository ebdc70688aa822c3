"""In-memory PostRepository — records every call so tests can assert store access."""

from itertools import count

from blog.core.object_id import generate_post_id


class FakePostRepository:
    def __init__(self):
        self.posts: dict[str, dict] = {}
        self.calls: list[str] = []
        self._clock = count(1_700_000_000)

    async def insert(self, title, body, tags):
        self.calls.append("insert")
        post_id = generate_post_id(now=next(self._clock))
        self.posts[post_id] = {
            "id": post_id, "title": title, "body": body, "tags": list(tags),
            "created_at": None,
        }
        return dict(self.posts[post_id])

    async def find(self, tag, skip, limit):
        self.calls.append("find")
        matches = [
            p for p in sorted(self.posts.values(), key=lambda p: p["id"], reverse=True)
            if tag is None or tag in p["tags"]
        ]
        return [dict(p) for p in matches[skip:skip + limit]]

    async def count(self, tag=None):
        self.calls.append("count")
        return sum(1 for p in self.posts.values() if tag is None or tag in p["tags"])

    async def find_by_id(self, post_id):
        self.calls.append("find_by_id")
        post = self.posts.get(post_id)
        return dict(post) if post else None

    async def find_by_id_and_update(self, post_id, fields):
        self.calls.append("update")
        post = self.posts.get(post_id)
        if post is None:
            return None
        post.update(fields)
        return dict(post)

    async def find_by_id_and_delete(self, post_id):
        self.calls.append("delete")
        return self.posts.pop(post_id, None)
