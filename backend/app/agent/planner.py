from app.agent.artifacts import ArchitectureChoice, ComponentPlan, SignalSet

BACKEND_STACK = "TypeScript API (Express or Fastify)"

CLIENTS_WEB_AND_MOBILE = "Next.js (web) + React Native (mobile)"
CLIENTS_MOBILE = "React Native (mobile)"
CLIENTS_WEB = "Next.js (web)"

DATA_RELATIONAL = "PostgreSQL"
DATA_CACHE = "Redis (cache + pub/sub)"
DATA_WAREHOUSE = "Analytics warehouse (BigQuery/Snowflake)"
DATA_OBJECT_STORAGE = "Object storage (S3/GCS) + CDN"

INFRA_AUTOSCALING = "Containerized services with autoscaling (Kubernetes or managed services)"
INFRA_SINGLE_REGION = "Single-region container hosting with CI/CD"

SECURITY_COMPLIANCE = "OIDC, audit logging, encryption, policy enforcement"
SECURITY_BASELINE = "OIDC, rate limiting, and secret rotation"


def select_architecture(signals: SignalSet) -> ArchitectureChoice:
    """Pick the archetype. Only scale, compliance, streaming and marketplace count."""
    if signals.scale or signals.compliance or signals.streaming or signals.marketplace:
        return "microservices"
    return "modular-monolith"


def choose_clients(signals: SignalSet) -> str:
    if signals.mobile and signals.web:
        return CLIENTS_WEB_AND_MOBILE
    if signals.mobile:
        return CLIENTS_MOBILE
    return CLIENTS_WEB


def choose_data(signals: SignalSet) -> list[str]:
    stores = [DATA_RELATIONAL]
    if signals.realtime or signals.scale:
        stores.append(DATA_CACHE)
    if signals.data_heavy:
        stores.append(DATA_WAREHOUSE)
    if signals.streaming:
        stores.append(DATA_OBJECT_STORAGE)
    return stores


def plan_components(signals: SignalSet) -> ComponentPlan:
    return ComponentPlan(
        clients=choose_clients(signals),
        backend=BACKEND_STACK,
        data=choose_data(signals),
        infra=INFRA_AUTOSCALING if signals.scale else INFRA_SINGLE_REGION,
        security=SECURITY_COMPLIANCE if signals.compliance else SECURITY_BASELINE,
    )
