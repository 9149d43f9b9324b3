"""oaslintのコマンドラインエントリポイント。"""

if __name__ == "__main__":
    from oaslint.cli import main

    raise SystemExit(main())
