import unittest

from app.agent.artifacts import SignalSet
from app.agent.decision import (
    NEXT_STEPS,
    RATIONALE_MICROSERVICES,
    RATIONALE_MODULAR_MONOLITH,
    RISK_INTEGRATION,
    RISK_MVP,
    RISK_REALTIME,
    assemble_decision,
)
from app.agent.planner import DATA_RELATIONAL


def _signals(**flags: bool) -> SignalSet:
    values = {name: False for name in SignalSet.model_fields}
    values.update(flags)
    return SignalSet(**values)


class DecisionAssemblerTests(unittest.TestCase):
    def test_quiet_signals_produce_plain_monolith(self):
        decision = assemble_decision(_signals())

        self.assertEqual(decision.architecture, "modular-monolith")
        self.assertEqual(decision.rationale, RATIONALE_MODULAR_MONOLITH)
        self.assertEqual(decision.components.data, [DATA_RELATIONAL])
        self.assertEqual(decision.risks, [])

    def test_rationale_tracks_architecture(self):
        decision = assemble_decision(_signals(streaming=True))

        self.assertEqual(decision.architecture, "microservices")
        self.assertEqual(decision.rationale, RATIONALE_MICROSERVICES)

    def test_risks_follow_fixed_order(self):
        decision = assemble_decision(_signals(integration=True, realtime=True, mvp=True))

        self.assertEqual(decision.risks, [RISK_MVP, RISK_REALTIME, RISK_INTEGRATION])

    def test_next_steps_are_constant(self):
        first = assemble_decision(_signals())
        second = assemble_decision(_signals(scale=True, compliance=True, mvp=True))

        self.assertEqual(first.next_steps, list(NEXT_STEPS))
        self.assertEqual(second.next_steps, list(NEXT_STEPS))
        self.assertEqual(len(first.next_steps), 3)

    def test_wire_names_are_camel_case(self):
        payload = assemble_decision(_signals()).model_dump(mode="json", by_alias=True)

        self.assertIn("nextSteps", payload)
        self.assertNotIn("next_steps", payload)


if __name__ == "__main__":
    unittest.main()
