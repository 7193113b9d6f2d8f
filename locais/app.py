from __future__ import annotations

from fastapi import Depends, FastAPI
from fastapi.responses import RedirectResponse

from .auth import users
from .auth.dependencies import require_user
from .auth.security import Hasher, TokenSigner, get_hasher, get_token_signer
from .exception_handlers import setup_exception_handlers
from .favorites.service import add_favorite, list_favorites, remove_favorite
from .locations.models import (
    Location,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
    VoteCounts,
)
from .locations.store import increment_vote, list_locations


app = FastAPI(title="Locais API", version="1.0.0")
setup_exception_handlers(app)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/locations", response_model=list[Location])
def locations() -> list[Location]:
    return list_locations()


@app.post("/locations/{location_id}/like", response_model=VoteCounts)
def like(location_id: str) -> VoteCounts:
    return increment_vote(location_id, "likes")


@app.post("/locations/{location_id}/dislike", response_model=VoteCounts)
def dislike(location_id: str) -> VoteCounts:
    return increment_vote(location_id, "dislikes")


# ── Auth endpoints ───────────────────────────────────────────────────────


@app.post("/register")
def register(
    body: RegisterRequest,
    hasher: Hasher = Depends(get_hasher),
) -> RedirectResponse:
    users.register(body.name, body.email, body.password, hasher)
    return RedirectResponse(url="/login", status_code=303)


@app.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    hasher: Hasher = Depends(get_hasher),
    signer: TokenSigner = Depends(get_token_signer),
) -> TokenResponse:
    token = users.login(body.email, body.password, hasher, signer)
    return TokenResponse(token=token)


# ── Favorites (bearer token) ─────────────────────────────────────────────


@app.get("/favorites", response_model=list[Location])
def favorites(user_id: str = Depends(require_user)) -> list[Location]:
    return list_favorites(user_id)


@app.post("/favorites/{location_id}", response_model=MessageResponse)
def save_favorite(
    location_id: str,
    user_id: str = Depends(require_user),
) -> MessageResponse:
    add_favorite(user_id, location_id)
    return MessageResponse(message="Location saved to favorites")


@app.delete("/favorites/{location_id}", response_model=MessageResponse)
def delete_favorite(
    location_id: str,
    user_id: str = Depends(require_user),
) -> MessageResponse:
    remove_favorite(user_id, location_id)
    return MessageResponse(message="Location removed from favorites")
