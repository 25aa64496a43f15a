"""Shared test fixtures for docmuse."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture
def english_log() -> str:
    return "\n".join([
        "User: How should we store sessions?",
        "Assistant: We decided to use Redis for session storage because it is fast.",
        "User: What about the frontend?",
        "Assistant: I recommend we go with React instead of Angular, but the bundle is larger.",
        "User: Sounds good.",
        "Assistant: It is critical that we implemented the repository pattern for data access.",
        "```python",
        "class SessionRepository:",
        "    def __init__(self, redis):",
        "        self.redis = redis",
        "```",
    ])


@pytest.fixture
def korean_log() -> str:
    return "\n".join([
        "사용자: 상태 관리는 어떻게 할까요?",
        "어시스턴트: Redux를 선택했습니다. 생태계가 좋기 때문입니다.",
        "사용자: 데이터베이스는요?",
        "어시스턴트: PostgreSQL로 결정했습니다. 하지만 운영 비용이 조금 더 듭니다.",
    ])


@pytest.fixture
def typescript_source() -> str:
    return """import React, { useState, useEffect } from 'react';
import * as path from 'path';
import { helper } from './utils/helper';
import type { Config } from '@/types';

export interface Service {
  start(): void;
}

export class UserService extends BaseService implements Service {
  private users: User[] = [];
  readonly name: string;

  constructor(private db: Database) {
    super();
  }

  async getUser(id: string): Promise<User> {
    if (!id) {
      throw new Error('missing id');
    }
    return this.db.find(id);
  }

  start(): void {
    for (const u of this.users) {
      console.log(u);
    }
  }
}

export function formatName(first: string, last: string): string {
  return first && last ? `${first} ${last}` : first;
}

export const fetchData = async (url: string): Promise<Response> => {
  return fetch(url);
};

function internal(a, b = 2) {
  return a + b;
}
"""


@pytest.fixture
def python_source() -> str:
    return '''import os
import json, sys
from pathlib import Path
from .models import User, Group
from typing import (
    Any,
    Optional,
)


class Repository(Base, Mixin):
    """Stores users."""

    table = "users"
    limit: int = 10

    def __init__(self, conn):
        self.conn = conn
        self._cache = {}

    async def fetch(self, user_id: int) -> Optional[User]:
        """Fetch one user."""
        if user_id in self._cache:
            return self._cache[user_id]
        return None

    def _helper(self):
        def inner():
            return 1
        return inner()


class _Private:
    pass


def load(path: str, *, strict: bool = False) -> dict:
    for line in open(path):
        if not line:
            continue
    return {}


def _hidden():
    pass
'''


@pytest.fixture
def go_source() -> str:
    return """package server

import (
\t"fmt"
\t"net/http"
\t"github.com/acme/kit/log"
)

type Server struct {
\tAddr    string
\thandler http.Handler
\tBase
}

func NewServer(addr string) *Server {
\treturn &Server{Addr: addr}
}

func (s *Server) Start() error {
\tif s.Addr == "" {
\t\treturn fmt.Errorf("no addr")
\t}
\treturn http.ListenAndServe(s.Addr, s.handler)
}

func (s *Server) stop(force bool, timeout int) (bool, error) {
\treturn true, nil
}
"""


@pytest.fixture
def activity_log_path(tmp_path: Path):
    log_path = tmp_path / "activity.jsonl"
    with patch.dict(os.environ, {"DOCMUSE_LOG_PATH": str(log_path)}):
        yield log_path
