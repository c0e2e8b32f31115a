import pytest

from argtree import (
    ErrorResult,
    HandlerResult,
    HelpResult,
    VersionResult,
    command,
    simulate,
)
from argtree.exceptions import (
    AboveMaxError,
    EnumViolationError,
    InvalidNumberValueError,
    MissingRequiredError,
    UnrecognizedOptionsError,
)
from argtree.parser import boolean, number, positional, string


@pytest.fixture
def greet():
    return command(
        "greet",
        options={
            "name": positional().required(),
            "loud": boolean(),
            "mode": string().enum("a", "b"),
            "count": number().min(1).max(10),
        },
        handler=lambda options: pytest.fail("handler must not run"),
    )


@pytest.mark.asyncio
async def test_quoted_arguments(greet):
    result = await simulate(greet, "'Jane Doe' --loud", omit_undefined=True)
    assert result == HandlerResult({"name": "Jane Doe", "loud": True})
    assert result.type == "handler"


@pytest.mark.asyncio
async def test_full_option_map(greet):
    result = await simulate(greet, 'Jane --mode=b --count "3"')
    assert isinstance(result, HandlerResult)
    assert result.options == {"name": "Jane", "loud": None, "mode": "b", "count": 3}


@pytest.mark.asyncio
async def test_help_and_version(greet):
    assert await simulate(greet, "--help") == HelpResult()
    assert await simulate(greet, "Jane -h") == HelpResult()
    assert await simulate(greet, "-v") == VersionResult()


@pytest.mark.asyncio
async def test_enum_violation_is_returned(greet):
    result = await simulate(greet, "Jane --mode=c")
    assert isinstance(result, ErrorResult)
    assert result.type == "error"
    assert isinstance(result.error, EnumViolationError)
    assert result.error.option_name == "--mode"
    assert result.error.value == "c"
    assert result.error.allowed == ["a", "b"]


@pytest.mark.asyncio
async def test_number_errors_are_returned(greet):
    result = await simulate(greet, "Jane --count=15")
    assert isinstance(result.error, AboveMaxError)
    result = await simulate(greet, "Jane --count=abc")
    assert isinstance(result.error, InvalidNumberValueError)


@pytest.mark.asyncio
async def test_aggregate_errors_are_returned(greet):
    result = await simulate(greet, "--nope --also-nope=1")
    assert isinstance(result.error, MissingRequiredError)
    result = await simulate(greet, "Jane --nope --also-nope=1")
    assert isinstance(result.error, UnrecognizedOptionsError)
    assert result.error.unrecognized == ["--nope", "--also-nope"]


@pytest.mark.asyncio
async def test_unbalanced_quotes_are_returned(greet):
    result = await simulate(greet, "'Jane")
    assert isinstance(result, ErrorResult)
    assert isinstance(result.error, ValueError)


@pytest.mark.asyncio
async def test_transform_is_applied():
    async def transform(options):
        return options["name"].upper()

    cmd = command(
        "cmd", options={"name": positional()}, transform=transform, handler=print
    )
    assert await simulate(cmd, "jane") == HandlerResult("JANE")


@pytest.mark.asyncio
async def test_no_tree_resolution():
    parent = command("db", subcommands=[command("migrate")])
    result = await simulate(parent, "migrate")
    assert result == HandlerResult({})
