from prometheus_client import CollectorRegistry, Counter

registry = CollectorRegistry()

validations_total = Counter(
    "brdocs_validations_total",
    "Document validations by kind and outcome",
    ["kind", "outcome"],
    registry=registry,
)
generations_total = Counter(
    "brdocs_generations_total",
    "Synthetic documents generated by kind",
    ["kind"],
    registry=registry,
)
