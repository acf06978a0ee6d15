from promptinator import create_app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    from promptinator.core.config import settings

    print(f"🚀 Starting Promptinator backend on {settings.host}:{settings.port}")
    print(f"📚 API docs: http://localhost:{settings.port}/docs")

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
