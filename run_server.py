"""
Start the chat proxy locally.

Listens on PORT (default 3000). Set A4F_API_KEY in .env first; without it
the proxy still starts but every upstream call is rejected.
"""

import uvicorn

from trip_planner.config import settings

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Trip Planner chat proxy")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print(f"   - Health Check:  GET  http://localhost:{settings.PORT}/health")
    print(f"   - Chat Proxy:    POST http://localhost:{settings.PORT}/api/chat")
    print(f"   - API Docs:           http://localhost:{settings.PORT}/docs")
    print()
    print("📝 Test with curl:")
    print(f'   curl -X POST "http://localhost:{settings.PORT}/api/chat" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"prompt": "Plan a weekend in Ranchi"}\'')
    print()
    print("=" * 60)

    uvicorn.run(
        "trip_planner.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )
