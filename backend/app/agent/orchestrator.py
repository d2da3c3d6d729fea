import logging

from app.agent.artifacts import ArchitectureRequest, ArchitectureResponse
from app.agent.decision import assemble_decision
from app.agent.panel import advise
from app.agent.signals import detect_signals

logger = logging.getLogger(__name__)


def run_architecture_pipeline(request: ArchitectureRequest) -> ArchitectureResponse:
    """
    Turn a validated request into signals, panel opinions and a decision.

    Pure and reentrant: nothing is cached between calls.
    """
    signals = detect_signals(request.description)
    agents = advise(signals)
    decision = assemble_decision(signals)

    logger.info(
        "Recommended %s (signals: %s)",
        decision.architecture,
        ", ".join(signals.active()) or "none",
    )

    return ArchitectureResponse(
        input=request,
        signals=signals,
        agents=agents,
        decision=decision,
    )
