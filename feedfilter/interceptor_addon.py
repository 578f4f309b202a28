"""
FeedFilter mitmproxy addon.

Removes low-popularity items from JSON feed responses:

    mitmdump -s feedfilter/interceptor_addon.py --set min_play=5000
"""

import logging
import re
from typing import Optional

from mitmproxy import command, ctx, exceptions, http

from feedfilter.environment import env_config, split_hosts
from feedfilter.interfaces import AuditLogger, ConfigProvider
from feedfilter.services.body_filter import filter_body
from feedfilter.standalone import StandaloneAuditLogger, StandaloneConfigProvider
from feedfilter.tools.file_store import default_store
from feedfilter.tools.host_match import host_matches, path_matches

logger = logging.getLogger(__name__)


class FeedFilter:

    def __init__(
        self,
        config_provider: Optional[ConfigProvider] = None,
        audit_logger: Optional[AuditLogger] = None,
    ) -> None:
        self.config_provider = config_provider or StandaloneConfigProvider()
        self.config = self.config_provider.load_config()
        self.audit_logger = audit_logger or StandaloneAuditLogger(debug=self.config.get('debug', False))
        self.metrics = {
            'responses_total': 0,      # responses in scope (host/path matched)
            'filtered_total': 0,       # bodies rewritten
            'passthrough_total': 0,    # bodies left unmodified
            'lists_matched_total': 0,
            'items_dropped_total': 0,
            'errors_total': 0,
        }

    def load(self, loader):
        loader.add_option(
            name="min_play",
            typespec=int,
            default=self.config['min_play'],
            help="Minimum play/view count an item needs to stay in a feed list (0 keeps everything)",
        )
        loader.add_option(
            name="filter_enabled",
            typespec=bool,
            default=self.config['filter_enabled'],
            help="Drop low-popularity items; when off, feed lists are left unfiltered",
        )
        loader.add_option(
            name="filter_hosts",
            typespec=str,
            default=';'.join(self.config['filter_hosts']),
            help="Semicolon separated domains to filter (subdomains included); empty for all hosts",
        )
        loader.add_option(
            name="filter_path",
            typespec=str,
            default=self.config['filter_path'],
            help="Regular expression the request path must match; empty for all paths",
        )
        if self.config.get('debug'):
            logger.setLevel(logging.DEBUG)
            logger.debug("[FEEDFILTER] env overrides: %s", env_config.get_info())
        audit_path = getattr(self.audit_logger, 'log_file', None)
        if audit_path:
            default_store.rotate_log_if_needed(audit_path, max_size_mb=5.0, keep_lines=1000)

    def configure(self, updated):
        if "min_play" in updated and ctx.options.min_play < 0:
            raise exceptions.OptionsError("min_play must be a non-negative integer")
        if "filter_path" in updated and ctx.options.filter_path:
            try:
                re.compile(ctx.options.filter_path)
            except re.error as e:
                raise exceptions.OptionsError(f"invalid filter_path: {e}") from e
        if updated & {"min_play", "filter_enabled"}:
            logger.info("[FEEDFILTER] min_play=%s enabled=%s",
                        ctx.options.min_play, ctx.options.filter_enabled)

    @command.command("feedfilter.reload")
    def reload(self) -> None:
        """Re-read the config file and environment and apply them as options."""
        self.config_provider.refresh()
        self.config = self.config_provider.load_config()
        ctx.options.update(
            min_play=self.config['min_play'],
            filter_enabled=self.config['filter_enabled'],
            filter_hosts=';'.join(self.config['filter_hosts']),
            filter_path=self.config['filter_path'],
        )
        logger.info("[FEEDFILTER] config reloaded from %s", getattr(self.config_provider, 'config_path', '?'))

    @command.command("feedfilter.save")
    def save(self) -> None:
        """Persist the current filter options to the config file."""
        ok = self.config_provider.save_config({
            'min_play': ctx.options.min_play,
            'filter_enabled': ctx.options.filter_enabled,
            'filter_hosts': split_hosts(ctx.options.filter_hosts),
            'filter_path': ctx.options.filter_path,
        })
        if not ok:
            raise exceptions.CommandError("could not save feedfilter config")
        self.config = self.config_provider.load_config()

    def in_scope(self, flow: http.HTTPFlow) -> bool:
        req = flow.request
        host = (req.pretty_host or '').lower()
        return (host_matches(host, split_hosts(ctx.options.filter_hosts))
                and path_matches(req.path, ctx.options.filter_path))

    def _passthrough(self, host: str, path: str, reason: str) -> None:
        self.metrics['passthrough_total'] += 1
        logger.debug("[PASSTHROUGH] %s%s reason=%s", host, path, reason)
        self.audit_logger.log_passthrough(host, path, reason)

    def response(self, flow: http.HTTPFlow) -> None:
        """Rewrite the response body of in-scope JSON feed responses."""
        host = ''
        try:
            if not flow.response or not self.in_scope(flow):
                return
            req = flow.request
            host, path = req.pretty_host, req.path
            self.metrics['responses_total'] += 1

            try:
                body = flow.response.content
            except ValueError:
                # content-encoding could not be decoded
                self._passthrough(host, path, 'not-text')
                return

            threshold = ctx.options.min_play
            result = filter_body(body, threshold, enabled=ctx.options.filter_enabled)
            if result.passthrough:
                if result.reason == 'error':
                    self.metrics['errors_total'] += 1
                self._passthrough(host, path, result.reason)
                return

            flow.response.content = result.body.encode('utf-8')
            self.metrics['filtered_total'] += 1
            self.metrics['lists_matched_total'] += result.lists_matched
            self.metrics['items_dropped_total'] += result.items_dropped
            if result.items_dropped:
                logger.info("[FILTER] %s%s dropped %d item(s) below %d",
                            host, path, result.items_dropped, threshold)
            self.audit_logger.log_filtered(host, path, threshold, result.lists_matched, result.items_dropped)
        except Exception as e:
            # Never break the response because of the filter
            self.metrics['errors_total'] += 1
            logger.warning("[ERROR] response filtering failed: %s: %s", type(e).__name__, e)
            self.audit_logger.log_error(f"response filtering failed: {type(e).__name__}: {e}", host=host)


addons = [FeedFilter()]
