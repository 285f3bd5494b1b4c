from raid_chat.presentation.http.controllers.chat_sessions import router as chat_sessions_router

__all__ = ["chat_sessions_router"]
