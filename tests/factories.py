"""Entity builders shared by tests."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt

from tube.config import AuthSettings, Settings
from tube.domain.model import Comment, Tweet, User, Video
from tube.domain.value import CommentId, Email, TweetId, UserId, Username, VideoId


def make_user(username: str = "alice", email: str | None = None) -> User:
    """Build a user with a fresh ID."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=Email(email or f"{username}@example.com"),
    )


def make_video(
    owner_id: UserId,
    title: str = "Cell division explained",
    created_at: datetime | None = None,
    **fields,
) -> Video:
    """Build a video; extra keyword arguments override model fields."""
    created_at = created_at or datetime.now()
    return Video(
        id=VideoId(uuid4()),
        owner_id=owner_id,
        title=title,
        description=fields.pop("description", "A short explainer"),
        media_url=fields.pop("media_url", "https://cdn.example.com/v.mp4"),
        thumbnail_url=fields.pop("thumbnail_url", "https://cdn.example.com/t.jpg"),
        created_at=created_at,
        updated_at=fields.pop("updated_at", created_at),
        **fields,
    )


def make_comment(
    video_id: VideoId, owner_id: UserId, content: str = "Great video", **fields
) -> Comment:
    """Build a comment on a video."""
    return Comment(
        id=CommentId(uuid4()),
        video_id=video_id,
        owner_id=owner_id,
        content=content,
        **fields,
    )


def make_tweet(owner_id: UserId, content: str = "New upload tomorrow", **fields) -> Tweet:
    """Build a tweet."""
    return Tweet(id=TweetId(uuid4()), owner_id=owner_id, content=content, **fields)


def minutes_ago(minutes: int) -> datetime:
    """Timestamp ``minutes`` before now, for ordering fixtures."""
    return datetime.now() - timedelta(minutes=minutes)


def mint_token(
    user_id: str,
    username: str | None = None,
    settings: AuthSettings | None = None,
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Sign a token the way the identity service issues them."""
    settings = settings or Settings().auth
    payload = {"user_id": user_id, "exp": datetime.now(timezone.utc) + expires_in}
    if username is not None:
        payload["username"] = username
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def auth_headers(user: User) -> dict[str, str]:
    """Bearer header naming ``user`` as the caller."""
    token = mint_token(str(user.id), user.username.root)
    return {"Authorization": f"Bearer {token}"}
