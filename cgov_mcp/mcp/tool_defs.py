"""MCP Tool Definitions for the cgov server.

This module contains all tool definitions returned by the tools/list method.
Each tool definition includes the schema for its input parameters.

Tool Categories:
    - Database: query_database, list_tables, describe_table
    - Constitution: search_constitution, get_constitution_section
    - Vision 2030: search_vision_2030, get_vision_section, get_vision_kpis
    - Voting Principles: search_voting_principles, get_voting_principles_section,
      get_voting_kpi_budgets, get_funding_partitions, get_voting_criteria
"""

_FULL_SECTIONS_PROPERTY = {
    "type": "boolean",
    "description": "If true, return full matching sections. If false (default), return only relevant snippets.",
}


TOOL_DEFINITIONS: list[dict] = [
    # ============ Database Tools ============
    {
        "name": "query_database",
        "description": "Execute a read-only SQL query against the PostgreSQL database. Use this to search and retrieve information.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "sql": {"type": "string", "description": "The SQL SELECT query to execute"},
            },
            "required": ["sql"],
        },
    },
    {
        "name": "list_tables",
        "description": "List all tables in the database with their schemas",
        "inputSchema": {"type": "object", "properties": {}},
    },
    {
        "name": "describe_table",
        "description": "Get the schema/structure of a specific table including column names, types, and constraints",
        "inputSchema": {
            "type": "object",
            "properties": {
                "table_name": {"type": "string", "description": "The name of the table to describe"},
                "schema_name": {
                    "type": "string",
                    "description": "The schema name (defaults to 'public')",
                },
            },
            "required": ["table_name"],
        },
    },
    # ============ Constitution Tools ============
    {
        "name": "search_constitution",
        "description": """Search the Cardano Constitution for relevant text. The constitution contains:
- Preamble
- Article I: Cardano Blockchain Tenets (10 core tenets) and Guardrails
- Article II: The Cardano Blockchain Community
- Article III: Participatory and Decentralized Governance
- Article IV: The Cardano Blockchain Ecosystem Budget
- Article V: Delegated Representatives (DReps)
- Article VI: Stake Pool Operators (SPOs)
- Article VII: Constitutional Committee (CC)
- Article VIII: Amendment Process
- Appendix I: Cardano Blockchain Guardrails (detailed parameter guardrails)
- Appendix II: Supporting Guidance

Use this tool to find constitutional provisions, tenets, guardrails, governance rules, and other constitutional text.""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query - can be keywords, phrases, or topics (e.g., 'treasury withdrawal', 'DRep voting threshold', 'tenet 5', 'hard fork')",
                },
                "section": {
                    "type": "string",
                    "description": "Optional: specific section to search within (e.g., 'Article I', 'Appendix I', 'Preamble', 'Tenet 5')",
                },
                "include_full_sections": _FULL_SECTIONS_PROPERTY,
            },
            "required": ["query"],
        },
    },
    {
        "name": "get_constitution_section",
        "description": """Get a specific section of the Cardano Constitution by name. Useful for retrieving exact text of articles, tenets, or guardrails.

Available sections include:
- PREAMBLE
- ARTICLE I through ARTICLE VIII
- Section numbers (e.g., "Section 1", "Section 2")
- TENET 1 through TENET 10
- APPENDIX I: CARDANO BLOCKCHAIN GUARDRAILS
- APPENDIX II: SUPPORTING GUIDANCE
- Specific guardrail codes (e.g., "PARAM-01", "TREASURY-01a", "HARDFORK-01")""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "section_name": {
                    "type": "string",
                    "description": "Name of the section to retrieve (e.g., 'Article I', 'Tenet 5', 'PARAM-01', 'Preamble')",
                },
            },
            "required": ["section_name"],
        },
    },
    # ============ Vision 2030 Tools ============
    {
        "name": "search_vision_2030",
        "description": """Search the Cardano Vision 2030 Strategic Framework document. The vision outlines Cardano's strategy to become "The World's Operating System" by 2030.

The document contains:
- Executive Summary with 4 key objectives
- Core KPIs (TVL, Monthly transactions, MAU, Uptime, Revenue, etc.)
- Pillar 1: Infrastructure & Research Excellence (Scalability, Security, L2, ZK)
- Pillar 2: Adoption & Utility (DeFi, RWA, Payments, Developer Experience)
- Pillar 3: Governance (DRep incentives, Turnout-aware voting, Treasury seasons)
- Pillar 4: Community & Ecosystem Growth (Talent, Global engagement)
- Pillar 5: Ecosystem Sustainability (Treasury management, SPO incentives)

Use this tool to find strategic objectives, KPI targets, pillar details, and specific focus areas.""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query - can be keywords, phrases, or topics (e.g., 'TVL target', 'DeFi strategy', 'SPO incentives', 'governance', 'KPI')",
                },
                "pillar": {
                    "type": "string",
                    "description": "Optional: filter by pillar (e.g., 'Pillar 1', 'Infrastructure', 'Governance', 'Adoption')",
                },
                "include_full_sections": _FULL_SECTIONS_PROPERTY,
            },
            "required": ["query"],
        },
    },
    {
        "name": "get_vision_section",
        "description": """Get a specific section of the Cardano Vision 2030 document by name. Useful for retrieving exact text of pillars, KPIs, or focus areas.

Available sections include:
- Executive Summary
- Core Key Performance Indicators (KPIs)
- Pillar 1: Infrastructure & Research Excellence
  - I.1. Scalability & Interoperability
  - I.2. Security & Resilience
- Pillar 2: Adoption & Utility
  - A.1. High-Value Verticals
  - A.2. Experience (Business & Consumer)
  - A.3. Developer Experience
- Pillar 3: Governance
  - G.1. Incentivized & Accessible Governance
  - G.2. Turnout-Aware Voting with Delegator Safeguard
  - G.3. Treasury Seasons
- Pillar 4: Community & Ecosystem Growth
  - C.1. Talent Acquisition & Retention
  - C.2. Global Engagement & Market Adoption
- Pillar 5: Ecosystem Sustainability & Resilience
  - E.1. Financial Stewardship & Tokenomics
  - E.2. SPO Incentives""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "section_name": {
                    "type": "string",
                    "description": "Name of the section to retrieve (e.g., 'Executive Summary', 'Pillar 1', 'KPI', 'Treasury Seasons', 'SPO Incentives')",
                },
            },
            "required": ["section_name"],
        },
    },
    {
        "name": "get_vision_kpis",
        "description": """Get the Cardano Vision 2030 Key Performance Indicators (KPIs) and their targets. Returns the core KPIs that measure Cardano's progress toward 2030 goals.

Core KPIs include:
- Total Value Locked (TVL): Target $3B
- Monthly Transactions: Target ≥27M
- Monthly Active Users (MAU): Target 1M
- Uptime: Target 99.98%
- Annual Protocol Revenue: Target ≥16M ada
- DRep Participation Rate: Target >70%
- Throughput Capacity: Target 3x current""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "category": {
                    "type": "string",
                    "description": "Optional: filter by KPI category (e.g., 'Adoption', 'Reliability', 'Governance', 'Revenue', 'Scalability')",
                },
            },
            "required": [],
        },
    },
    # ============ Voting Principles Tools ============
    {
        "name": "search_voting_principles",
        "description": """Search the Cardano Governance Voting Principles 2025-2030 document. This document establishes voting principles for treasury funding decisions aligned with Vision 2030 KPIs.

The document contains:
- Budget Framework: 1,000M ADA over 5 years (200M NCL per year)
- The 9 Vision 2030 KPIs with budget allocations (111.1M ADA each)
- Front-Loaded Funding Model: 10 partitions with decreasing funding intensity
- Recognized Party Requirements for first 30% of KPI progress
- Voting Decision Framework: Capability filter and weighted evaluation criteria
- Annual Review & Adjustment mechanisms

Use this tool to find voting guidelines, budget allocations, KPI definitions, and decision-making frameworks.""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query - can be keywords, phrases, or topics (e.g., 'front-loaded', 'recognized party', 'TVL budget', 'voting criteria')",
                },
                "section": {
                    "type": "string",
                    "description": "Optional: specific section to search within (e.g., 'Budget Framework', 'Voting Decision', 'Recognized Party')",
                },
                "include_full_sections": _FULL_SECTIONS_PROPERTY,
            },
            "required": ["query"],
        },
    },
    {
        "name": "get_voting_principles_section",
        "description": """Get a specific section of the Cardano Governance Voting Principles document by name.

Available sections include:
- 1. Overview
- 2. Budget Framework (NCL, Per-KPI Allocation)
- 3. The 9 Vision 2030 KPIs
- 4. Front-Loaded Funding Model (Rationale, 10-Partition Distribution)
- 5. Recognized Party Requirement (First 30% Gate, Definition, Collaboration Requirements)
- 6. Voting Decision Framework (Capability Filter, Weighted Criteria, Budget Alignment)
- 7. Annual Review & Adjustment
- 8. Summary Table: Budget by Year and KPI
- 9. Appendix: KPI Progress Calculation Examples""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "section_name": {
                    "type": "string",
                    "description": "Name of the section to retrieve (e.g., 'Budget Framework', 'Front-Loaded', 'Recognized Party', 'Voting Decision')",
                },
            },
            "required": ["section_name"],
        },
    },
    {
        "name": "get_voting_kpi_budgets",
        "description": """Get the 9 Vision 2030 KPIs and their budget allocations from the Voting Principles document.

Each KPI receives 111.1M ADA over the 5-year period (2025-2030):
1. Total Value Locked (TVL): $200M → $3B
2. Monthly Transactions: 800k → ≥27M
3. Monthly Active Users (MAU): 100-300k → 1M
4. Monthly Uptime: 99.98%
5. DRep Voting Power Distribution: >22 DReps control 50%+1
6. Alternative Node Clients: 1 → ≥2
7. Annual Protocol Revenue: 3.5M → ≥16M ada
8. DRep Participation Rate: >70% active voting
9. Throughput Capacity: 300k → 900k tx/day (3x)""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "kpi_number": {
                    "type": "number",
                    "description": "Optional: specific KPI number (1-9) to retrieve details for",
                },
            },
            "required": [],
        },
    },
    {
        "name": "get_funding_partitions",
        "description": """Get the front-loaded funding distribution model from the Voting Principles document.

The model divides each KPI's 111.1M ADA budget into 10 progress partitions:
- First 10% progress: 18% of budget (20M ADA) - 1.8x multiplier
- First 30% progress: 46% of budget (~51.1M ADA)
- Last 30% progress: 16% of budget (~17.8M ADA)
- Funding intensity ratio: First 10% gets 4.5× more than last 10%

This front-loading ensures early infrastructure investment with compounding returns.""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "partition": {
                    "type": "string",
                    "description": "Optional: specific partition range to retrieve (e.g., '0-10', '30-40', 'first 30%')",
                },
            },
            "required": [],
        },
    },
    {
        "name": "get_voting_criteria",
        "description": """Get the voting decision framework and evaluation criteria from the Voting Principles document.

The framework includes:
- **Preliminary Filter**: Team capability pass/fail check (value created ≥ budget requested)
- **Weighted Evaluation Criteria**:
  - KPI Alignment (35%): Does proposal advance Vision 2030 KPIs?
  - Measurable Impact (30%): Are deliverables quantifiable?
  - Cost Efficiency (20%): Is budget proportional to expected progress?
  - Risk Mitigation (15%): Are milestones/escrow/clawback in place?
- **Budget Alignment Checks**: Partition fit, recognized party requirement""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "criterion": {
                    "type": "string",
                    "description": "Optional: specific criterion to retrieve (e.g., 'capability', 'alignment', 'efficiency', 'risk')",
                },
            },
            "required": [],
        },
    },
]
