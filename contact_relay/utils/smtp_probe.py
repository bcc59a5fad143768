import asyncio
import socket

from ..settings import Settings


async def resolve_host(host: str) -> list[str]:
    loop = asyncio.get_running_loop()
    infos = await loop.getaddrinfo(host, None, type=socket.SOCK_STREAM)
    return list(dict.fromkeys(str(info[4][0]) for info in infos))


async def check_tcp(host: str, port: str, timeout: float) -> None:
    _, writer = await asyncio.wait_for(asyncio.open_connection(host, port), timeout)
    writer.close()
    await writer.wait_closed()


async def probe_smtp(settings: Settings) -> str:
    """Describe whether the configured mail server resolves and accepts TCP connections. Never includes the password."""

    server = settings.smtp_server
    port = "" if settings.smtp_port is None else str(settings.smtp_port)
    lines = [f'SMTP_SERVER="{server}"', f'SMTP_PORT="{port}"', f'SMTP_EMAIL="{settings.smtp_email}"', ""]

    if not server or not port:
        lines.append("SMTP_SERVER or SMTP_PORT not set")
        return "\n".join(lines) + "\n"

    try:
        ips = await resolve_host(server)
    except OSError as err:
        lines.append(f"DNS lookup failed: {err}")
    else:
        lines.append(f"Resolved IPs: [{' '.join(ips)}]")

    address = f"[{server}]:{port}" if ":" in server else f"{server}:{port}"
    try:
        await check_tcp(server, port, settings.smtp_probe_timeout)
    except (OSError, asyncio.TimeoutError) as err:
        lines.append(f"Dial TCP {address} error: {str(err) or type(err).__name__}")
    else:
        lines.append(f"Dial TCP {address}: success")

    return "\n".join(lines) + "\n"
