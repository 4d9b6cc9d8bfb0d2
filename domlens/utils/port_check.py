import socket


class PortChecker:
    @staticmethod
    def is_port_open(port: int, host: str = '127.0.0.1', timeout: float = 0.5) -> bool:
        """纯 Socket 检测浏览器调试端口是否开启"""
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.settimeout(timeout)
            return s.connect_ex((host, port)) == 0

    @staticmethod
    def split_addr(addr: str) -> tuple:
        """'host:port' -> (host, port)，缺省 host 为 127.0.0.1"""
        host, _, port = addr.rpartition(':')
        return (host or '127.0.0.1', int(port))
