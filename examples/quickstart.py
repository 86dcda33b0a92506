"""
trident-autoclass quickstart — resolving storage classes and building volume configs.

Run directly:

    python examples/quickstart.py

Everything runs against an in-memory registry; nothing is provisioned.
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Demo 1: Resolve a storage class from volume options
# ---------------------------------------------------------------------------

def demo_resolve_storage_class(orchestrator) -> str:
    """Resolve options to a storage class, registering it on first use."""
    print("\n=== Demo 1: Resolve a storage class ===")

    from trident_autoclass.core import StorageClassResolver

    options = {"pool": "aggr1", "minIOPS": "int:500", "bogus": "!!"}
    resolver = StorageClassResolver(orchestrator)
    config = resolver.resolve(options)

    print(f"  Options     : {options}")
    print(f"  Name        : {config.name}")
    print(f"  Pools       : {config.pools}")
    print(f"  Attributes  : {sorted(config.attributes)}")
    return config.name


# ---------------------------------------------------------------------------
# Demo 2: Equivalent options resolve to the same class
# ---------------------------------------------------------------------------

def demo_dedup(orchestrator, first_name: str) -> None:
    """Resolve the same options in a different order."""
    print("\n=== Demo 2: Deduplication ===")

    from trident_autoclass.core import StorageClassResolver

    options = {"bogus": "!!", "minIOPS": "int:500", "pool": "aggr1"}
    config = StorageClassResolver(orchestrator).resolve(options)

    print(f"  Same name   : {config.name == first_name}")
    print(f"  Registered  : {len(orchestrator.list_storage_classes())} class(es)")


# ---------------------------------------------------------------------------
# Demo 3: Build a volume config
# ---------------------------------------------------------------------------

def demo_volume_config(orchestrator) -> None:
    """Resolve a class and build the volume config in one call."""
    print("\n=== Demo 3: Volume config ===")

    from trident_autoclass.core import prepare_volume

    options = {"size": "10g", "fstype": "xfs", "snapshots": "bool:true"}
    storage_class, volume = prepare_volume("db-data", options, orchestrator)

    print(f"  Storage class : {storage_class.name}")
    print("\n  Volume JSON:")
    for line in volume.model_dump_json(indent=2).splitlines():
        print(f"    {line}")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    print("trident-autoclass quickstart demo")
    print("=" * 40)

    from trident_autoclass.models import Backend
    from trident_autoclass.registry import InMemoryOrchestrator

    orchestrator = InMemoryOrchestrator(
        [
            Backend(name="ontap-nas", storage={"aggr1": {}, "aggr2": {}}),
            Backend(name="solidfire", storage={"Gold": {}}),
        ]
    )

    name = demo_resolve_storage_class(orchestrator)
    demo_dedup(orchestrator, name)
    demo_volume_config(orchestrator)

    print("\n" + "=" * 40)
    print("All demos completed successfully.")


if __name__ == "__main__":
    main()
