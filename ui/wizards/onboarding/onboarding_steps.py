# -*- coding: utf-8 -*-
"""
Onboarding steps shown to new Blockcast users.
"""

from services.wizard import Step, StepContent, StepCatalog


ONBOARDING_STEPS = (
    Step(
        id=0,
        title="Welcome to Blockcast",
        short_description="The future of prediction markets",
        icon="target",
        content=StepContent(
            title="Predict the Future, Earn Rewards",
            description=(
                "Blockcast combines AI-powered fact-checking with cryptocurrency "
                "prediction markets. Bet on trending news, verify claims, and earn "
                "rewards for accurate predictions."
            ),
            highlights=(
                "Real-time prediction markets",
                "AI fact-checking technology",
                "Blockchain transparency",
                "Social trading with friends",
            ),
        ),
    ),
    Step(
        id=1,
        title="How Prediction Markets Work",
        short_description="Learn the basics of betting",
        icon="trending-up",
        content=StepContent(
            title="Simple YES/NO Betting",
            description=(
                "Each market asks a question about future events. You can bet YES if "
                "you think it will happen, or NO if you think it won't. Your potential "
                "winnings depend on the odds."
            ),
            highlights=(
                "Buy YES if you think it will happen",
                "Buy NO if you think it won't",
                "Higher odds = higher potential returns",
                "Markets resolve based on real outcomes",
            ),
        ),
    ),
    Step(
        id=2,
        title="AI Fact-Checking",
        short_description="Verify claims with AI",
        icon="shield",
        content=StepContent(
            title="Smart Verification System",
            description=(
                "Our AI analyzes claims using multiple sources and provides confidence "
                "ratings. Use this feature to research before betting or verify news "
                "you see online."
            ),
            highlights=(
                "Multi-source analysis",
                "Confidence ratings",
                "Blockchain verification",
                "Source credibility scores",
            ),
        ),
    ),
    Step(
        id=3,
        title="Managing Your Wallet",
        short_description="Fund your account safely",
        icon="wallet",
        content=StepContent(
            title="Secure ETH Transactions",
            description=(
                "Add funds to your wallet to start betting. All transactions are "
                "secured on the blockchain. Start small and gradually increase your "
                "bets as you gain confidence."
            ),
            highlights=(
                "Secure blockchain transactions",
                "Easy fund management",
                "Transparent betting history",
                "Responsible betting limits",
            ),
        ),
    ),
    Step(
        id=4,
        title="Social Features",
        short_description="Invite friends and compete",
        icon="users",
        content=StepContent(
            title="Better Together",
            description=(
                "Invite friends to join, share interesting markets, and compete on "
                "leaderboards. Earn referral bonuses when friends join and place their "
                "first bets."
            ),
            highlights=(
                "Friend referral rewards",
                "Social leaderboards",
                "Share markets easily",
                "Competitive challenges",
            ),
        ),
    ),
    Step(
        id=5,
        title="Ready to Start!",
        short_description="You're all set",
        icon="zap",
        content=StepContent(
            title="Start Your Journey",
            description=(
                "You're now ready to explore Blockcast! Start with small bets, use the "
                "verification system, and don't forget to invite friends for extra "
                "rewards."
            ),
            highlights=(
                "Explore trending markets",
                "Start with small amounts",
                "Verify claims before betting",
                "Share with friends for bonuses",
            ),
        ),
    ),
)


def create_onboarding_catalog() -> StepCatalog:
    """Create the onboarding step catalog."""
    return StepCatalog(ONBOARDING_STEPS)
