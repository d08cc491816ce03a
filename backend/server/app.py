from __future__ import annotations

from typing import Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from core.config import RuleOptions

from .schemas import ChainStepRequest, MoveRequest, ResetRequest
from .session import GameSession, MoveRejected


def create_app(options: Optional[RuleOptions] = None, session: Optional[GameSession] = None) -> FastAPI:
    app = FastAPI(title="Checkers Rules Engine", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    shared = session if session is not None else GameSession(options)

    def get_session() -> GameSession:
        return shared

    @app.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/board")
    def read_board(session: GameSession = Depends(get_session)):
        return session.serialize()

    @app.post("/move")
    def play_move(payload: MoveRequest, session: GameSession = Depends(get_session)):
        try:
            return session.make_move(payload)
        except MoveRejected as exc:
            raise HTTPException(status_code=400, detail={"reason": exc.reason, "message": str(exc)}) from exc
        except RuntimeError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc

    @app.get("/chain")
    def read_chain(session: GameSession = Depends(get_session)):
        return session.chain_options()

    @app.post("/chain")
    def play_chain_step(payload: ChainStepRequest, session: GameSession = Depends(get_session)):
        try:
            return session.chain_step(payload)
        except MoveRejected as exc:
            raise HTTPException(status_code=400, detail={"reason": exc.reason, "message": str(exc)}) from exc
        except RuntimeError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc

    @app.post("/quit")
    def quit_game(session: GameSession = Depends(get_session)):
        try:
            return session.quit()
        except RuntimeError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc

    @app.post("/reset")
    def reset_game(payload: Optional[ResetRequest] = None, session: GameSession = Depends(get_session)):
        return session.reset(payload)

    return app


app = create_app()
