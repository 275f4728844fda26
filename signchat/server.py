#!/usr/bin/env python3
"""
Sign Chat - FastAPI backend
Stores chat messages in memory, recognizes signs from posted hand landmarks
and answers with canned replies and placeholder avatar animations.
"""

import logging
from datetime import datetime
from typing import List, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

from .config import Cfg, load_config
from .messages import MessageStore
from .recognizer import SignRecognizer
from .responses import (
    generate_response_animation,
    generate_sign_response,
    generate_text_response,
    text_to_sign_animation,
)
from .sessions import SessionRegistry
from .types import HandObservation, InvalidLandmarkSet, Landmark

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_SESSION = "default"


# Request/Response models
class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class CreateMessageRequest(CamelModel):
    content: Optional[str] = None
    type: Optional[str] = None
    user_id: Optional[str] = Field(None, alias="userId")
    username: Optional[str] = None
    confidence: Optional[float] = None


class LandmarkPayload(BaseModel):
    x: float
    y: float
    z: float = 0.0


class HandPayload(BaseModel):
    landmarks: List[LandmarkPayload]
    handedness: str
    score: float = 1.0


class SignToTextRequest(CamelModel):
    session_id: str = Field(DEFAULT_SESSION, alias="sessionId")
    hands: List[HandPayload] = []


class ResetRequest(CamelModel):
    session_id: str = Field(DEFAULT_SESSION, alias="sessionId")


class TextToSignRequest(BaseModel):
    text: Optional[str] = None


class ChatMessagePayload(BaseModel):
    content: Optional[str] = None
    type: Optional[str] = None
    confidence: Optional[float] = None


class AIChatRequest(BaseModel):
    message: Optional[ChatMessagePayload] = None
    type: Optional[str] = None


def _to_observations(hands: List[HandPayload]) -> List[HandObservation]:
    return [
        HandObservation(
            landmarks=tuple(Landmark(lm.x, lm.y, lm.z) for lm in hand.landmarks),
            side=hand.handedness,
            score=hand.score,
        )
        for hand in hands
    ]


def create_app(cfg: Optional[Cfg] = None) -> FastAPI:
    """Build the FastAPI app with its own message store and sessions."""
    cfg = cfg or load_config()

    app = FastAPI(
        title="Sign Chat API",
        description="Sign language chat demo: in-memory messages, template-based sign recognition",
        version="0.1.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    store = MessageStore()
    sessions = SessionRegistry(
        lambda: SignRecognizer.from_config(cfg), max_sessions=cfg.server.max_sessions
    )
    app.state.cfg = cfg
    app.state.store = store
    app.state.sessions = sessions

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"{datetime.now().isoformat()} - {request.method} {request.url.path}")
        return await call_next(request)

    @app.get("/")
    async def root():
        """Health check endpoint"""
        return {
            "status": "online",
            "service": "Sign Chat",
            "templates": [t.name for t in cfg.templates],
            "active_sessions": len(sessions),
        }

    @app.get("/health")
    async def health():
        return {
            "status": "healthy",
            "active_sessions": len(sessions),
            "messages": len(store),
        }

    @app.get("/api/messages")
    async def get_messages():
        """Get all messages"""
        return [message.to_client_format() for message in store.all()]

    @app.post("/api/messages", status_code=201)
    async def create_message(request: CreateMessageRequest):
        """Create a new message"""
        try:
            message = store.add(
                content=request.content,
                type=request.type,
                user_id=request.user_id,
                username=request.username,
                confidence=request.confidence,
            )
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return message.to_client_format()

    @app.post("/api/messages/sign-to-text")
    async def sign_to_text(request: SignToTextRequest):
        """
        Recognize a sign from one frame of hand landmarks.

        Each session keeps its own detection history, so an event is only
        returned once the sign has been held for a few frames.
        """
        if not request.hands:
            # Nothing to recognize; do not open a session for it
            return {"sessionId": request.session_id, "event": None}

        recognizer = sessions.get_or_create(request.session_id)
        try:
            event = recognizer.process_frame(_to_observations(request.hands))
        except InvalidLandmarkSet as e:
            logger.warning(f"⚠️ Rejected frame for session {request.session_id}: {e}")
            raise HTTPException(status_code=400, detail=str(e))
        except (ArithmeticError, ValueError) as e:
            logger.warning(f"⚠️ Degenerate landmarks for session {request.session_id}: {e}")
            raise HTTPException(status_code=422, detail=f"Degenerate landmark geometry: {e}")

        return {
            "sessionId": request.session_id,
            "event": event.to_dict() if event else None,
        }

    @app.post("/api/messages/reset")
    async def reset_session(request: ResetRequest):
        """Reset a session's recognition state, e.g. when the user changes"""
        recognizer = sessions.get(request.session_id)
        if recognizer is None:
            raise HTTPException(status_code=404, detail=f"Unknown session: {request.session_id}")
        recognizer.reset()
        logger.info(f"🔄 Reset recognition session: {request.session_id}")
        return {"sessionId": request.session_id, "reset": True}

    @app.post("/api/messages/text-to-sign")
    async def text_to_sign(request: TextToSignRequest):
        """Convert text to placeholder sign language animation data"""
        if not request.text:
            raise HTTPException(status_code=400, detail="Text is required")
        return text_to_sign_animation(request.text)

    @app.post("/api/messages/ai-chat")
    async def ai_chat(request: AIChatRequest):
        """Reply to a chat message with a canned response and avatar animation"""
        message = request.message
        if message is None or not message.content:
            raise HTTPException(status_code=400, detail="Message content is required")

        if request.type == "sign" or message.type == "sign":
            response = generate_sign_response(message.content, message.confidence)
        else:
            response = generate_text_response(message.content)

        return {
            "response": response,
            "animationData": generate_response_animation(response),
            "timestamp": datetime.now().isoformat(),
        }

    return app


def main():
    import uvicorn

    cfg = load_config()
    logger.info(f"🚀 Starting Sign Chat server on http://{cfg.server.host}:{cfg.server.port}")
    logger.info(f"🤟 Loaded {len(cfg.templates)} gesture templates")
    logger.info(f"📚 API documentation available at http://localhost:{cfg.server.port}/docs")

    uvicorn.run(
        create_app(cfg),
        host=cfg.server.host,
        port=cfg.server.port,
        log_level="info"
    )


if __name__ == "__main__":
    main()
