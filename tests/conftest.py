"""Shared fixtures for codeflow tests."""

import textwrap

import pytest

from codeflow.config import CodeflowConfig
from codeflow.parsers.source_analyzer import SourceAnalyzer


@pytest.fixture(scope="session")
def analyzer():
    return SourceAnalyzer()


@pytest.fixture
def analyze(analyzer):
    """Analyze dedented source text."""

    def _analyze(path, source):
        return analyzer.analyze(path, textwrap.dedent(source).lstrip("\n"))

    return _analyze


@pytest.fixture
def config():
    return CodeflowConfig(verbose=False)


@pytest.fixture
def express_repo(tmp_path):
    """A small Express-style repository on disk."""
    src = tmp_path / "src"
    (src / "controllers").mkdir(parents=True)
    (src / "routes.ts").write_text(textwrap.dedent("""\
        import { Router } from 'express';
        import { getUsers } from './controllers/userController';

        const router = Router();
        router.get('/users', getUsers);

        export default router;
    """))
    (src / "controllers" / "userController.ts").write_text(textwrap.dedent("""\
        import { findAll } from '../db';

        export function getUsers(req, res) {
          const users = findAll();
          res.json(users);
          return users;
        }
    """))
    (src / "db.ts").write_text(textwrap.dedent("""\
        export const findAll = () => query('select * from users');

        function query(sql) {
          return [];
        }
    """))
    return tmp_path
