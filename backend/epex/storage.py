"""Where an API client keeps its bearer token between runs.

Callers pick the implementation: `FileTokenStorage` for an interactive
client that should stay signed in, `NullTokenStorage` for server-side use
where nothing must outlive the process.
"""
import json
import os
from pathlib import Path
from typing import Optional


class TokenStorage:
    def get_token(self) -> Optional[str]:
        raise NotImplementedError

    def set_token(self, token: str) -> None:
        raise NotImplementedError

    def clear_token(self) -> None:
        raise NotImplementedError

    def has_token(self) -> bool:
        return self.get_token() is not None


class NullTokenStorage(TokenStorage):
    def get_token(self):
        return None

    def set_token(self, token):
        pass

    def clear_token(self):
        pass


class FileTokenStorage(TokenStorage):
    TOKEN_KEY = 'auth_token'

    def __init__(self, path):
        self.path = Path(path).expanduser()

    def get_token(self):
        try:
            with self.path.open('r', encoding='utf-8') as fh:
                data = json.load(fh)
        except FileNotFoundError:
            return None
        except (OSError, ValueError):
            # Unreadable or corrupt file: behave as signed out
            return None
        token = data.get(self.TOKEN_KEY) if isinstance(data, dict) else None
        return token if isinstance(token, str) and token else None

    def set_token(self, token):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + '.tmp')
        with tmp_path.open('w', encoding='utf-8') as fh:
            json.dump({self.TOKEN_KEY: token}, fh)
        os.chmod(tmp_path, 0o600)
        os.replace(tmp_path, self.path)

    def clear_token(self):
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
