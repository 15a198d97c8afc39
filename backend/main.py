# backend/main.py
# Lancement local : `python main.py` (équivalent à `uvicorn app.main:app --reload`).

import os

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "5000")),
        reload=os.getenv("RELOAD", "false").lower() == "true",
    )
