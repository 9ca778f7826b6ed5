"""
Entrypoint to run the backend server.

From project root: cd backend && uvicorn lingobot.main:app
Or: cd backend && python main.py
"""
if __name__ == "__main__":
    from lingobot.__main__ import main

    main()
