#!/usr/bin/env python3
"""Main entry point for the application"""

if __name__ == "__main__":
    import uvicorn
    from config import settings

    print(f"Starting server on port {settings.PORT}...")

    uvicorn.run(
        "dexterity.web.app:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        access_log=True,
        reload=settings.ENVIRONMENT == "development"
    )
