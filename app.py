import socket

from country_browser.config import AppSettings
from country_browser.ui.dash_app import create_dash_app
from country_browser.logging_config import configure_logging

configure_logging()

settings = AppSettings.from_env()
app = create_dash_app(settings)
server = app.server


def find_free_port(start_port: int) -> int:
    """Finds an available port starting from start_port."""
    port = start_port
    while port < start_port + 100:  # Try up to 100 ports
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(('localhost', port)) != 0:
                return port
        port += 1
    return start_port


if __name__ == "__main__":
    final_port = find_free_port(settings.port)

    if final_port != settings.port:
        print(f"Warning: Port {settings.port} was taken. Starting on {final_port}")

    app.run(host="0.0.0.0", port=final_port, debug=settings.debug)
