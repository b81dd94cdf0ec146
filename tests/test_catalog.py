from portprobe.scanner.catalog import guess_service, match_banner


def test_guess_known_ports():
    assert guess_service(22) == "SSH"
    assert guess_service(80) == "HTTP"
    assert guess_service(443) == "HTTPS"
    assert guess_service(3306) == "MySQL"
    assert guess_service(6379) == "Redis"


def test_guess_unknown_port():
    assert guess_service(12345) == "Unknown"


def test_match_is_case_insensitive():
    assert match_banner("220 ftp ready") == "FTP"
    assert match_banner("+PONG redis") == "Redis"
    assert match_banner("5.7.33 MySQL Community") == "MySQL"


def test_first_keyword_wins():
    # SSH is checked before HTTP
    assert match_banner("http tunnel over ssh") == "SSH"
    # "SMTP" contains no earlier keyword
    assert match_banner("220 mail ESMTP Postfix") == "SMTP"


def test_no_keyword():
    assert match_banner("hello there") == "Unknown"
