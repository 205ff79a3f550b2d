"""Static marketing copy for the LiquidGen landing page."""

from typing import Dict


BRAND = "LiquidGen"
TAGLINE = "Turn LP yield into buybacks for new launches — $LQ + $SOL on Solana"
HEADER_CTAS = ["Connect Wallet", "Docs"]

HERO_TITLE = "All-in-one DeFi on Solana — Yield-powered launchpad"
HERO_BODY = (
    "LiquidGen lets users lock LP positions (e.g. $LQ-$SOL, $SOL-USD) to earn yield. "
    "A configurable portion of that yield is used to buy back newly launching tokens "
    "(voted by the community) and burn $LQ — aligning incentives between LP providers, "
    "projects, and token holders."
)

WHY_USERS_HEADING = "Why this attracts users"
WHY_USERS = [
    "Maximize returns from low-risk LP lockups",
    "Participate in governance and vote which projects receive buybacks",
    "$LQ deflation via burn mechanics tied to buybacks",
    "Built-in swap aggregation, LP mining, and launchpad tools",
]

TOKEN_MECHANICS_HEADING = "Token mechanics (high level)"
TOKEN_MECHANICS = (
    "Protocol takes yield generated from locked LPs (example below) — after a small "
    "platform ops fee — most yield is used to buy SOL & USD into newly launched tokens. "
    "Simultaneously a share of LQ is burned and LPs receive their usual yield share."
)

CALCULATOR_HEADING = "Example (live calculator)"
CALCULATOR_BLURB = (
    "Adjust parameters to see how $10M at 20% APR behaves and how buybacks are scheduled."
)
CALCULATOR_CTAS = ["Copy summary", "Print"]
SCHEDULE_HEADING = "Simulated buyback schedule (30 days)"

QUICK_OVERVIEW_HEADING = "Quick overview"
# Card label → key in the results display strings
QUICK_OVERVIEW_CARDS = [
    ("Locked value", "locked_value"),
    ("Avg APR", "apr"),
    ("Monthly buyback pool", "buyback_pool"),
    ("Est. LQ burned (demo)", "burned_units"),
]

NEXT_STEPS_HEADING = "Next steps"
NEXT_STEPS = [
    "Wire up price oracles (Pyth / Switchboard) for SOL/USD and token prices.",
    "Implement on-chain mechanic: yield collector vault & automated swap-to-target-token "
    "executed by keeper bots or cron triggers.",
    "Design governance voting UI to choose launch projects and vote weight from locked LPs.",
    "Audit and simulate MEV/resilience for buyback execution — ensure execution slippage protection.",
]
ASIDE_CTAS = ["Launch demo", "Get whitepaper"]

FOOTER = "© LiquidGen — Demo landing page"


def landing_content() -> Dict[str, object]:
    return {
        "brand": BRAND,
        "tagline": TAGLINE,
        "header_ctas": list(HEADER_CTAS),
        "hero": {"title": HERO_TITLE, "body": HERO_BODY},
        "why_users": {"heading": WHY_USERS_HEADING, "items": list(WHY_USERS)},
        "token_mechanics": {"heading": TOKEN_MECHANICS_HEADING, "body": TOKEN_MECHANICS},
        "calculator": {
            "heading": CALCULATOR_HEADING,
            "blurb": CALCULATOR_BLURB,
            "ctas": list(CALCULATOR_CTAS),
            "schedule_heading": SCHEDULE_HEADING,
        },
        "quick_overview": {
            "heading": QUICK_OVERVIEW_HEADING,
            "cards": [{"label": label, "key": key} for label, key in QUICK_OVERVIEW_CARDS],
        },
        "next_steps": {"heading": NEXT_STEPS_HEADING, "items": list(NEXT_STEPS)},
        "aside_ctas": list(ASIDE_CTAS),
        "footer": FOOTER,
    }
