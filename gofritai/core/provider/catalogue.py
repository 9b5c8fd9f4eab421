"""Built-in catalogue of free tier providers."""

from gofritai.core.provider.models import Category, Duration, FreeTier, Limit, Period, Provider
from gofritai.core.provider.registry import ProviderRegistry

DEFAULT_PROVIDERS: tuple[Provider, ...] = (
    # Compute
    Provider(
        id="oracle-arm",
        name="Oracle Cloud ARM",
        category=Category.COMPUTE,
        free_tier=FreeTier(
            description="4 OCPU + 24GB RAM forever",
            limits=(
                Limit(resource="vcpu", amount=4, unit="cores"),
                Limit(resource="memory", amount=24, unit="GB"),
                Limit(resource="storage", amount=200, unit="GB"),
            ),
            duration=Duration.FOREVER,
        ),
        requires_credit_card=False,
        url="https://cloud.oracle.com",
    ),
    Provider(
        id="fly-io",
        name="Fly.io",
        category=Category.COMPUTE,
        free_tier=FreeTier(
            description="3 shared VMs + 160GB transfer",
            limits=(
                Limit(resource="vms", amount=3, unit="instances"),
                Limit(resource="transfer", amount=160, unit="GB", period=Period.MONTH),
            ),
            duration=Duration.FOREVER,
        ),
        requires_credit_card=True,
        url="https://fly.io",
    ),
    Provider(
        id="render",
        name="Render",
        category=Category.COMPUTE,
        free_tier=FreeTier(
            description="750h/mo, spins down",
            limits=(Limit(resource="hours", amount=750, unit="hours", period=Period.MONTH),),
            duration=Duration.FOREVER,
        ),
        requires_credit_card=False,
        url="https://render.com",
    ),
    Provider(
        id="cloudflare-workers",
        name="Cloudflare Workers",
        category=Category.SERVERLESS,
        free_tier=FreeTier(
            description="100k req/day + 10ms CPU",
            limits=(
                Limit(resource="requests", amount=100_000, unit="requests", period=Period.DAY),
                Limit(resource="cpu", amount=10, unit="ms"),
            ),
            duration=Duration.FOREVER,
        ),
        requires_credit_card=False,
        url="https://workers.cloudflare.com",
    ),
    # LLM APIs
    Provider(
        id="groq",
        name="Groq",
        category=Category.LLM,
        free_tier=FreeTier(
            description="30 req/min, Llama/Mixtral/Whisper",
            limits=(Limit(resource="requests", amount=30, unit="requests", period=Period.MINUTE),),
            duration=Duration.FOREVER,
        ),
        requires_credit_card=False,
        url="https://groq.com",
        api_endpoint="https://api.groq.com/openai/v1",
    ),
    Provider(
        id="google-ai-studio",
        name="Google AI Studio",
        category=Category.LLM,
        free_tier=FreeTier(
            description="60 req/min, Gemini 2.5 Pro/Flash",
            limits=(Limit(resource="requests", amount=60, unit="requests", period=Period.MINUTE),),
            duration=Duration.FOREVER,
        ),
        requires_credit_card=False,
        url="https://aistudio.google.com",
        api_endpoint="https://generativelanguage.googleapis.com/v1beta",
    ),
    Provider(
        id="openrouter",
        name="OpenRouter",
        category=Category.LLM,
        free_tier=FreeTier(
            description="Free models available",
            limits=(),
            duration=Duration.FOREVER,
        ),
        requires_credit_card=False,
        url="https://openrouter.ai",
        api_endpoint="https://openrouter.ai/api/v1",
    ),
    # Databases
    Provider(
        id="supabase",
        name="Supabase",
        category=Category.DATABASE,
        free_tier=FreeTier(
            description="500MB Postgres + 50k auth + realtime",
            limits=(
                Limit(resource="storage", amount=500, unit="MB"),
                Limit(resource="auth_users", amount=50_000, unit="users"),
                Limit(resource="bandwidth", amount=2, unit="GB", period=Period.MONTH),
            ),
            duration=Duration.FOREVER,
        ),
        requires_credit_card=False,
        url="https://supabase.com",
    ),
    Provider(
        id="turso",
        name="Turso",
        category=Category.DATABASE,
        free_tier=FreeTier(
            description="9GB + 500M reads",
            limits=(
                Limit(resource="storage", amount=9, unit="GB"),
                Limit(resource="reads", amount=500_000_000, unit="reads", period=Period.MONTH),
            ),
            duration=Duration.FOREVER,
        ),
        requires_credit_card=False,
        url="https://turso.tech",
    ),
    Provider(
        id="upstash",
        name="Upstash",
        category=Category.DATABASE,
        free_tier=FreeTier(
            description="10k cmd/day Redis",
            limits=(Limit(resource="commands", amount=10_000, unit="commands", period=Period.DAY),),
            duration=Duration.FOREVER,
        ),
        requires_credit_card=False,
        url="https://upstash.com",
    ),
    # Storage
    Provider(
        id="cloudflare-r2",
        name="Cloudflare R2",
        category=Category.STORAGE,
        free_tier=FreeTier(
            description="10GB storage + ZERO egress",
            limits=(
                Limit(resource="storage", amount=10, unit="GB"),
                Limit(resource="egress", amount=0, unit="cost"),
            ),
            duration=Duration.FOREVER,
        ),
        requires_credit_card=False,
        url="https://www.cloudflare.com/r2",
    ),
    Provider(
        id="backblaze-b2",
        name="Backblaze B2",
        category=Category.STORAGE,
        free_tier=FreeTier(
            description="10GB storage",
            limits=(Limit(resource="storage", amount=10, unit="GB"),),
            duration=Duration.FOREVER,
        ),
        requires_credit_card=False,
        url="https://www.backblaze.com/b2",
    ),
)


def build_default_registry() -> ProviderRegistry:
    """Build a registry over the built-in catalogue."""
    return ProviderRegistry(DEFAULT_PROVIDERS)
