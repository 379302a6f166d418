"""
Behave environment configuration for nsupdate-cloudflare scenarios.
"""

import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_all(context):
    """Set up test environment before all tests."""
    context.test_zone = "023e105f4ecef8ad9ca31a8372d0c353"
    logger.info("Test environment setup complete")


def before_scenario(context, scenario):
    """Set up each test scenario."""
    context.existing_records = []
    context.nsupdate_text = ""
    context.summary = None
    context.error = None

    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    logger.info(f"Completed scenario: {scenario.name}")
