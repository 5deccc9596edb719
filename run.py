# -*- coding: utf-8 -*-

import sys

from GitHubIssuesBrowser import IssuesBrowser
from GitHubIssuesBrowser.classes.ClientSession import ClientSession
from GitHubIssuesBrowser.classes.OptimisticMutator import OptimisticMutator
from GitHubIssuesBrowser.classes.Settings import Settings
from GitHubIssuesBrowser.classes.gql import GQL
from GitHubIssuesBrowser.logger import LoggerSettings, configure_loggers

# Usage: python run.py [organization/repository] [pages]
settings = Settings.from_env()
logger = configure_loggers(LoggerSettings(level=settings.log_level))

gql = GQL(
    ClientSession.from_settings(settings),
    issues_page_size=settings.issues_page_size,
    reactions_limit=settings.reactions_limit,
)
browser = IssuesBrowser(gql, OptimisticMutator(settings.star_policy))

path = sys.argv[1] if len(sys.argv) > 1 else settings.default_path
pages = int(sys.argv[2]) if len(sys.argv) > 2 else 1

state = browser.fetch(path)
for _ in range(pages - 1):
    if not browser.has_more or state.errors:
        break
    state = browser.fetch_more()

if state.errors:
    for error in state.errors:
        logger.error(error.message)
    sys.exit(1)

repository = state.repository
logger.info(
    f"{state.organization.name}/{repository.name}: {repository.stargazers.total_count} stars, "
    f"{'starred' if repository.viewer_has_starred else 'not starred'}, "
    f"{len(state.issues.edges)}/{state.issues.total_count} open issues loaded"
)
for issue in state.issues.nodes:
    reactions = " ".join(reaction.content for reaction in issue.reactions.nodes)
    logger.info(f"{issue.title} - {issue.url} {reactions}")
