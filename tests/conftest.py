"""
Shared pytest fixtures for cgov-mcp tests.

Document fixtures are small markdown files written to a temporary
directory under the real document filenames. The database is replaced by
an in-memory fake that records the statements it receives.
"""

from pathlib import Path
from typing import Any

import pytest

from cgov_mcp.engine.documents import CONSTITUTION, VISION, VOTING_PRINCIPLES, DocumentStore
from cgov_mcp.engine.dispatch import ToolDispatcher
from cgov_mcp.engine.handlers import HandlerContext

CONSTITUTION_TEXT = """# CARDANO CONSTITUTION

## PREAMBLE

We, the Cardano community, adopt this Constitution.

## ARTICLE I. TENETS AND GUARDRAILS

**Tenet 1**: Transactions shall not be censored.

**Tenet 5**: Fees shall be disclosed.

## ARTICLE III. GOVERNANCE

Treasury withdrawal actions must be consistent with an approved budget.

## APPENDIX I: GUARDRAILS

PARAM-01 (x - "must not") Parameters must not change without a governance action.

PARAM-02a (x - "must") Changes must be reviewed.

TREASURY-01a (x - "must") Withdrawals must not exceed the net change limit.
"""

VISION_TEXT = """---
title: Vision 2030
---

## Executive Summary

Cardano aims to be the world's operating system.

## Core Key Performance Indicators (KPIs)

| Area | KPI | Target |
| :--- | :--- | :--- |
| Adoption | Total Value Locked | $3B |
| Governance | DRep Participation | >70% |

## Pillar 1: Infrastructure

### I.1. Scalability

Layer 2 solutions raise throughput.

## Pillar 3: Governance

### G.3. Treasury Seasons

Treasury funding is allocated in seasons.
"""

VOTING_TEXT = """# Voting Principles

## 1. Overview

Principles for treasury voting.

## 3. The 9 Vision 2030 KPIs

| # | KPI | Budget |
| :- | :- | :- |
| 1 | Total Value Locked | 111.1M ADA |
| 2 | Monthly Transactions | 111.1M ADA |

---

## 4. Front-Loaded Funding Model

| Progress Partition | Share |
| --- | --- |
| 0-10% | 18% |
| 30-40% | 11% |

## 5. Recognized Party Requirement

First 30% gate.

## 6. Voting Decision Framework

### 6.1 Team Capability

Pass/fail capability filter.

### 6.2 Cost Efficiency

Budget proportional to progress.

## 7. Annual Review

Reviewed yearly.
"""


class FakePool:
    """Stands in for DatabasePool; returns canned rows."""

    def __init__(self, rows: list[dict[str, Any]] | None = None, error: Exception | None = None):
        self.rows = rows if rows is not None else []
        self.error = error
        self.queries: list[tuple[str, tuple[Any, ...]]] = []
        self.close_calls = 0

    async def query(self, sql: str, *params: Any) -> list[dict[str, Any]]:
        self.queries.append((sql, params))
        if self.error:
            raise self.error
        return self.rows

    async def close(self) -> None:
        self.close_calls += 1


@pytest.fixture
def documents_dir(tmp_path: Path) -> Path:
    """Temporary directory holding the three sample documents."""
    (tmp_path / CONSTITUTION.filename).write_text(CONSTITUTION_TEXT, encoding="utf-8")
    (tmp_path / VISION.filename).write_text(VISION_TEXT, encoding="utf-8")
    (tmp_path / VOTING_PRINCIPLES.filename).write_text(VOTING_TEXT, encoding="utf-8")
    return tmp_path


@pytest.fixture
def fake_pool() -> FakePool:
    return FakePool(rows=[{"id": 1, "name": "alpha"}])


@pytest.fixture
def handler_context(documents_dir: Path, fake_pool: FakePool) -> HandlerContext:
    return HandlerContext(pool=fake_pool, store=DocumentStore(documents_dir))


@pytest.fixture
def dispatcher(handler_context: HandlerContext) -> ToolDispatcher:
    return ToolDispatcher(handler_context)
