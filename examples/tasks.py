def build(options):
    target = "release" if options["release"] else "debug"
    print(f"Building {options['project']} ({target}, {options['jobs']} jobs)")


async def clean(options):
    print(f"Removing {options['path']}")
