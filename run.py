#!/usr/bin/env python3
"""
metagen - Quick Start Script

Run this script to start the metagen server.
"""
import sys
import os

# Add the project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

if __name__ == "__main__":
    import uvicorn
    from metagen.config import get_settings, require_credentials

    settings = get_settings()
    require_credentials(settings)

    print("=" * 50)
    print("metagen")
    print("=" * 50)
    print(f"Server starting at http://{settings.host}:{settings.port}")
    print(f"AI: {settings.ai_model}")
    print("=" * 50)

    uvicorn.run(
        "metagen.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
