from main import main, parse_args


def test_parse_args_defaults():
    args = parse_args([])
    assert args.database_url is None
    assert not args.init_db
    assert not args.reset_db


def test_init_db(tmp_path, capsys):
    url = f"sqlite:///{tmp_path / 'students.db'}"
    assert main(['--database-url', url, '--init-db']) == 0
    assert "数据库连接成功" in capsys.readouterr().out
    assert (tmp_path / 'students.db').exists()


def test_reset_db_with_yes(tmp_path):
    url = f"sqlite:///{tmp_path / 'students.db'}"
    assert main(['--database-url', url, '--reset-db', '--yes']) == 0


def test_missing_config_aborts(monkeypatch, capsys):
    for key in ['DATABASE_URL', 'DB_HOST', 'DB_NAME', 'DB_USER', 'DB_PASSWORD']:
        monkeypatch.delenv(key, raising=False)
    assert main([]) == 1
    assert "系统启动失败" in capsys.readouterr().out
