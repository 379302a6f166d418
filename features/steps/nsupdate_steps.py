"""
Step definitions for nsupdate replay scenarios.
"""

from behave import given, then, when

from nsupdate_cloudflare.core.dns_manager import DNSManager
from nsupdate_cloudflare.exceptions import ParseError
from nsupdate_cloudflare.providers.dns_client import DNSClient


@given("the zone contains the records")
def step_impl(context):
    """Seed the mock provider with existing records."""
    context.existing_records = [
        {
            "id": row["id"],
            "type": row["type"],
            "name": row["name"],
            "content": row["content"],
            "ttl": int(row["ttl"]),
        }
        for row in context.table
    ]


@given("the nsupdate file")
def step_impl(context):
    """Use the step's text block as nsupdate input."""
    context.nsupdate_text = context.text


@when("I replay the nsupdate file")
def step_impl(context):
    """Replay the input against the mock provider."""
    context.dns_client = DNSClient(
        {
            "default_provider": "mock",
            "dns_providers": {"mock": {"records": context.existing_records}},
        }
    )
    manager = DNSManager(dns_client=context.dns_client)
    try:
        context.summary = manager.execute(context.nsupdate_text, context.test_zone)
    except ParseError as e:
        context.error = e


@then("batch {number:d} processed {processed:d} requests with {failed:d} failed")
def step_impl(context, number, processed, failed):
    batch = context.summary.batches[number - 1]
    assert batch.send, f"Batch {number} was not sent"
    assert batch.tally.processed == processed, f"Processed {batch.tally.processed}"
    assert batch.tally.failed == failed, f"Failed {batch.tally.failed}"


@then("batch {number:d} was not sent")
def step_impl(context, number):
    batch = context.summary.batches[number - 1]
    assert not batch.send
    assert batch.tally is None


@then("the run processed {processed:d} requests in total with {failed:d} failed")
def step_impl(context, processed, failed):
    total = context.summary.total
    assert (total.processed, total.failed) == (processed, failed), f"Got {total}"


@then('the zone contains "{name}" {record_type} "{content}"')
def step_impl(context, name, record_type, content):
    records = context.dns_client.provider.records
    assert any(
        r["name"] == name and r["type"] == record_type and r["content"] == content
        for r in records
    ), f"{name} {record_type} {content} not found in {records}"


@then('the zone does not contain "{name}"')
def step_impl(context, name):
    records = context.dns_client.provider.records
    assert all(r["name"] != name for r in records), f"{name} found in {records}"


@then("the zone has {count:d} records")
def step_impl(context, count):
    assert len(context.dns_client.provider.records) == count


@then("the run fails with a parse error on line {line_number:d}")
def step_impl(context, line_number):
    assert context.error is not None, "Expected a parse error"
    assert context.error.line_number == line_number, f"Got line {context.error.line_number}"
