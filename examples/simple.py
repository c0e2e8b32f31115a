import asyncio

from argtree import Argtree, HookType, command
from argtree.parser import boolean, number, positional, string


async def deploy(options):
    mode = "Dry run" if options["dry"] else "Deploying"
    print(f"{mode}: {options['service']} to {options['env']} x{options['replicas']}")


def rollback(options):
    print(f"Rolling back {options['service']} by {options['steps']} release(s)")


service = command(
    "service",
    aliases=["svc"],
    description="Service operations",
    subcommands=[
        command(
            "deploy",
            description="Deploy a service",
            options={
                "service": positional().desc("Service name").required(),
                "env": string().alias("e").enum("staging", "prod").default("staging"),
                "replicas": number().int().min(1).max(20).default(2),
                "dry": boolean().alias("d").desc("Print the plan only"),
            },
            handler=deploy,
        ),
        command(
            "rollback",
            description="Roll back a service",
            options={
                "service": positional().required(),
                "steps": number().int().min(1).default(1),
            },
            handler=rollback,
        ),
    ],
)

atr = Argtree([service], program_name="simple", version="1.0.0")
atr.register_hook(HookType.BEFORE, lambda cmd: print(f"-> {cmd.name}"))

if __name__ == "__main__":
    asyncio.run(atr.main())
