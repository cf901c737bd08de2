"""Table and block extracts from the vision and voting principles documents.

Each extract finds an anchored block of markdown by heading and
optionally narrows it to matching table rows or sub-sections. A missing
anchor is reported in the text rather than raised.
"""

import re

from .core import filter_sections, parse_sections

VISION_KPI_BLOCK = re.compile(r"## Core Key Performance Indicators \(KPIs\)[\s\S]*?(?=## Pillar 1)")
KPI_BUDGET_BLOCK = re.compile(r"## 3\. The 9 Vision 2030 KPIs[\s\S]*?(?=---)")
PARTITION_BLOCK = re.compile(r"## 4\. Front-Loaded Funding Model[\s\S]*?(?=## 5\.)")
CRITERIA_BLOCK = re.compile(r"## 6\. Voting Decision Framework[\s\S]*?(?=## 7\.)")

KPI_CATEGORIES = "Adoption, Reliability, Operational resilience, Revenue, Governance, Scalability"
KPI_COUNT = 9


def vision_kpis(content: str, category: str | None = None) -> str:
    """Core KPI tables from the vision document, optionally by category."""
    block = VISION_KPI_BLOCK.search(content)
    if not block:
        return "Could not find KPI section in the vision document."

    kpis = block.group(0)
    result = "# Cardano Vision 2030 - Key Performance Indicators\n\n"
    if not category:
        return result + kpis

    category_lower = category.lower()
    kept: list[str] = []
    in_table = False
    for line in kpis.split("\n"):
        if line.startswith("|") and "Area" in line:
            in_table = True
            kept.append(line)
            continue
        if line.startswith("| :"):
            kept.append(line)
            continue
        if in_table and line.startswith("|"):
            if category_lower in line.lower():
                kept.append(line)
        elif not line.startswith("|"):
            in_table = False

    if len(kept) > 2:
        return result + f"Filtered by category: {category}\n\n" + "\n".join(kept)

    return (
        result
        + f'No KPIs found for category "{category}".\n\n'
        + f"Available categories: {KPI_CATEGORIES}\n\n"
        + "Showing all KPIs:\n\n"
        + kpis
    )


def kpi_budgets(content: str, kpi_number: int | float | None = None) -> str:
    """The nine KPIs and their budget allocations, or a single KPI row.

    A fractional number inside 1-9 names no row and reports not found.
    """
    block = KPI_BUDGET_BLOCK.search(content)
    if not block:
        return "Could not find KPI section in the voting principles document."

    table = block.group(0)
    result = "# Vision 2030 KPIs - Budget Allocations\n\n"

    if kpi_number and 1 <= kpi_number <= KPI_COUNT:
        label = f"{kpi_number:g}"
        lines = table.split("\n")
        rows = [line for line in lines if line.startswith(f"| {label}")]
        if not rows:
            return result + f"KPI #{label} not found.\n"
        header = next((line for line in lines if "| # " in line), None)
        separator = next((line for line in lines if line.startswith("| ---")), None)
        result += f"## KPI #{label}\n\n"
        if header:
            result += header + "\n"
        if separator:
            result += separator + "\n"
        result += "\n".join(rows) + "\n\n"
        result += "**Budget Allocation:** 111.1M ADA over 5 years\n"
        return result

    result += table
    result += "\n**Total Budget:** 1,000M ADA across all 9 KPIs\n"
    result += "**Per-KPI Allocation:** 111.1M ADA each\n"
    return result


def _partition_row_matches(line: str, partition_lower: str) -> bool:
    if partition_lower in line.lower():
        return True
    # "first 30%" spans the 0-10, 10-20 and 20-30 rows
    return "first 30" in partition_lower and any(p in line for p in ("0%", "10%", "20%"))


def funding_partitions(content: str, partition: str | None = None) -> str:
    """The front-loaded funding table, optionally narrowed to partitions."""
    block = PARTITION_BLOCK.search(content)
    if not block:
        return "Could not find funding partition section in the voting principles document."

    model = block.group(0)
    result = "# Front-Loaded Funding Model\n\n"
    if not partition:
        return result + model

    partition_lower = partition.lower()
    kept: list[str] = []
    found_header = False
    for line in model.split("\n"):
        if "Progress Partition" in line:
            found_header = True
            kept.append(line)
            continue
        if line.startswith("| ---"):
            kept.append(line)
            continue
        if found_header and line.startswith("|") and _partition_row_matches(line, partition_lower):
            kept.append(line)

    if len(kept) > 2:
        return result + f"Filtered for: {partition}\n\n" + "\n".join(kept) + "\n"
    return result + f'No specific partition found for "{partition}". Showing full table:\n\n' + model


def voting_criteria(content: str, criterion: str | None = None) -> str:
    """The voting decision framework, optionally narrowed to one criterion."""
    block = CRITERIA_BLOCK.search(content)
    if not block:
        return "Could not find voting decision framework in the voting principles document."

    framework = block.group(0)
    result = "# Voting Decision Framework\n\n"
    if not criterion:
        return result + framework

    matches = filter_sections(parse_sections(framework), criterion)
    if not matches:
        return (
            result
            + f'No specific criterion found for "{criterion}". Showing full framework:\n\n'
            + framework
        )
    for match in matches:
        result += f"## {match.title}\n\n{match.content}\n\n"
    return result
