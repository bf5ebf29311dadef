import uvicorn

from message_gateway.main import app


def main() -> None:
    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)


if __name__ == "__main__":
    main()
