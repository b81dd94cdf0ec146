"""Well-known ports and banner keywords."""
from ..models import UNKNOWN_SERVICE

# Well-known ports and their service names
SERVICE_CATALOG = {
    21: "FTP", 22: "SSH", 23: "Telnet", 25: "SMTP", 53: "DNS",
    80: "HTTP", 110: "POP3", 143: "IMAP", 443: "HTTPS", 993: "IMAPS",
    995: "POP3S", 3306: "MySQL", 3389: "RDP", 5432: "PostgreSQL",
    6379: "Redis", 8080: "HTTP", 8443: "HTTPS"
}

# Ports that get an HTTP probe, and the label forced on a response
WEB_PORTS = {80: "HTTP", 8080: "HTTP", 443: "HTTPS", 8443: "HTTPS"}

# Checked in order against the upper-cased banner, first hit wins
BANNER_KEYWORDS = (
    ("SSH", "SSH"), ("HTTP", "HTTP"), ("FTP", "FTP"), ("SMTP", "SMTP"),
    ("POP3", "POP3"), ("IMAP", "IMAP"), ("MYSQL", "MySQL"),
    ("POSTGRESQL", "PostgreSQL"), ("REDIS", "Redis"),
)


def guess_service(port: int) -> str:
    """Look up the catalog name for a port."""
    return SERVICE_CATALOG.get(port, UNKNOWN_SERVICE)


def match_banner(banner: str) -> str:
    """Classify a banner by keyword."""
    text = banner.upper()
    for keyword, service in BANNER_KEYWORDS:
        if keyword in text:
            return service
    return UNKNOWN_SERVICE
