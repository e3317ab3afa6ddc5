"""Render platform API binding.

Generated from Render's public OpenAPI document (render-api 1.0.0). Every
endpoint is one method that hands its path, verb and arguments to
:class:`APICore`; path parameters and query parameters both go in
``metadata``. Do not add logic here, regenerate instead.
"""

from __future__ import annotations

from typing import Any

import httpx

from todolist.render_api.core import APICore, FetchResponse

USER_AGENT = "render-api/1.0.0 (todolist)"


class SDK:
    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.core = APICore(USER_AGENT, transport=transport)

    def config(self, timeout: int | None = None) -> None:
        """Override the default request timeout of 30 seconds (milliseconds)."""
        self.core.set_config(timeout=timeout)

    def auth(self, *values: str | int) -> "SDK":
        """Supply credentials: one bearer token, or a username and password.

            sdk.auth("rnd_xxx")
            sdk.auth("username", "password")
        """
        self.core.set_auth(*values)
        return self

    def server(self, url: str, variables: dict[str, Any] | None = None) -> None:
        """Point the SDK at another server URL, filling ``{name}`` variables."""
        self.core.set_server(url, variables)

    # --- blueprints ---

    async def list_blueprints(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """List blueprints."""
        return await self.core.fetch("/blueprints", "get", metadata=metadata)

    async def retrieve_blueprint(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve blueprint."""
        return await self.core.fetch("/blueprints/{blueprintId}", "get", metadata=metadata)

    async def update_blueprint(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Update blueprint."""
        return await self.core.fetch("/blueprints/{blueprintId}", "patch", body, metadata)

    async def disconnect_blueprint(self, metadata: dict[str, Any]) -> FetchResponse:
        """Disconnect blueprint."""
        return await self.core.fetch("/blueprints/{blueprintId}", "delete", metadata=metadata)

    async def list_blueprint_syncs(self, metadata: dict[str, Any]) -> FetchResponse:
        """List blueprint syncs."""
        return await self.core.fetch("/blueprints/{blueprintId}/syncs", "get", metadata=metadata)

    # --- disks ---

    async def list_disks(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """List disks."""
        return await self.core.fetch("/disks", "get", metadata=metadata)

    async def add_disk(self, body: dict[str, Any]) -> FetchResponse:
        """Add disk."""
        return await self.core.fetch("/disks", "post", body)

    async def retrieve_disk(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve disk."""
        return await self.core.fetch("/disks/{diskId}", "get", metadata=metadata)

    async def update_disk(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Update disk."""
        return await self.core.fetch("/disks/{diskId}", "patch", body, metadata)

    async def delete_disk(self, metadata: dict[str, Any]) -> FetchResponse:
        """Delete disk."""
        return await self.core.fetch("/disks/{diskId}", "delete", metadata=metadata)

    async def list_snapshots(self, metadata: dict[str, Any]) -> FetchResponse:
        """List snapshots."""
        return await self.core.fetch("/disks/{diskId}/snapshots", "get", metadata=metadata)

    async def restore_snapshot(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Restore snapshot."""
        return await self.core.fetch("/disks/{diskId}/snapshots/restore", "post", body, metadata)

    # --- users ---

    async def get_user(self) -> FetchResponse:
        """Get the authenticated user."""
        return await self.core.fetch("/users", "get")

    # --- owners ---

    async def list_owners(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """List authorized users and teams."""
        return await self.core.fetch("/owners", "get", metadata=metadata)

    async def retrieve_owner(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve user or team."""
        return await self.core.fetch("/owners/{ownerId}", "get", metadata=metadata)

    # --- notification-settings ---

    async def retrieve_owner_notification_settings(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve notification settings."""
        return await self.core.fetch("/notification-settings/owners/{ownerId}", "get", metadata=metadata)

    async def patch_owner_notification_settings(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Update notification settings."""
        return await self.core.fetch("/notification-settings/owners/{ownerId}", "patch", body, metadata)

    async def list_notification_overrides(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """List notification overrides."""
        return await self.core.fetch("/notification-settings/overrides", "get", metadata=metadata)

    async def retrieve_service_notification_overrides(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve notification override."""
        return await self.core.fetch("/notification-settings/overrides/services/{serviceId}", "get", metadata=metadata)

    async def patch_service_notification_overrides(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Update notification override."""
        return await self.core.fetch("/notification-settings/overrides/services/{serviceId}", "patch", body, metadata)

    # --- registrycredentials ---

    async def list_registry_credentials(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """List registry credentials."""
        return await self.core.fetch("/registrycredentials", "get", metadata=metadata)

    async def create_registry_credential(self, body: dict[str, Any]) -> FetchResponse:
        """Create registry credential."""
        return await self.core.fetch("/registrycredentials", "post", body)

    async def retrieve_registry_credential(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve registry credential."""
        return await self.core.fetch("/registrycredentials/{registryCredentialId}", "get", metadata=metadata)

    async def update_registry_credential(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Update registry credential."""
        return await self.core.fetch("/registrycredentials/{registryCredentialId}", "patch", body, metadata)

    async def delete_registry_credential(self, metadata: dict[str, Any]) -> FetchResponse:
        """Delete registry credential."""
        return await self.core.fetch("/registrycredentials/{registryCredentialId}", "delete", metadata=metadata)

    # --- services ---

    async def list_services(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """List services."""
        return await self.core.fetch("/services", "get", metadata=metadata)

    async def create_service(self, body: dict[str, Any]) -> FetchResponse:
        """Create service."""
        return await self.core.fetch("/services", "post", body)

    async def retrieve_service(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve service."""
        return await self.core.fetch("/services/{serviceId}", "get", metadata=metadata)

    async def update_service(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Update service."""
        return await self.core.fetch("/services/{serviceId}", "patch", body, metadata)

    async def delete_service(self, metadata: dict[str, Any]) -> FetchResponse:
        """Delete service."""
        return await self.core.fetch("/services/{serviceId}", "delete", metadata=metadata)

    async def list_deploys(self, metadata: dict[str, Any]) -> FetchResponse:
        """List deploys."""
        return await self.core.fetch("/services/{serviceId}/deploys", "get", metadata=metadata)

    async def create_deploy(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Trigger deploy."""
        return await self.core.fetch("/services/{serviceId}/deploys", "post", body, metadata)

    async def retrieve_deploy(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve deploy."""
        return await self.core.fetch("/services/{serviceId}/deploys/{deployId}", "get", metadata=metadata)

    async def cancel_deploy(self, metadata: dict[str, Any]) -> FetchResponse:
        """Cancel deploy."""
        return await self.core.fetch("/services/{serviceId}/deploys/{deployId}/cancel", "post", metadata=metadata)

    async def rollback_deploy(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Roll back deploy."""
        return await self.core.fetch("/services/{serviceId}/rollback", "post", body, metadata)

    async def get_env_vars_for_service(self, metadata: dict[str, Any]) -> FetchResponse:
        """List environment variables."""
        return await self.core.fetch("/services/{serviceId}/env-vars", "get", metadata=metadata)

    async def update_env_vars_for_service(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Update environment variables."""
        return await self.core.fetch("/services/{serviceId}/env-vars", "put", body, metadata)

    async def retrieve_env_var(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve environment variable."""
        return await self.core.fetch("/services/{serviceId}/env-vars/{envVarKey}", "get", metadata=metadata)

    async def update_env_var(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Add or update environment variable."""
        return await self.core.fetch("/services/{serviceId}/env-vars/{envVarKey}", "put", body, metadata)

    async def delete_env_var(self, metadata: dict[str, Any]) -> FetchResponse:
        """Delete environment variable."""
        return await self.core.fetch("/services/{serviceId}/env-vars/{envVarKey}", "delete", metadata=metadata)

    async def list_secret_files_for_service(self, metadata: dict[str, Any]) -> FetchResponse:
        """List secret files."""
        return await self.core.fetch("/services/{serviceId}/secret-files", "get", metadata=metadata)

    async def update_secret_files_for_service(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Update secret files."""
        return await self.core.fetch("/services/{serviceId}/secret-files", "put", body, metadata)

    async def retrieve_secret_file(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve secret file."""
        return await self.core.fetch("/services/{serviceId}/secret-files/{secretFileName}", "get", metadata=metadata)

    async def add_or_update_secret_file(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Add or update secret file."""
        return await self.core.fetch("/services/{serviceId}/secret-files/{secretFileName}", "put", body, metadata)

    async def delete_secret_file(self, metadata: dict[str, Any]) -> FetchResponse:
        """Delete secret file."""
        return await self.core.fetch("/services/{serviceId}/secret-files/{secretFileName}", "delete", metadata=metadata)

    async def list_events(self, metadata: dict[str, Any]) -> FetchResponse:
        """List events."""
        return await self.core.fetch("/services/{serviceId}/events", "get", metadata=metadata)

    async def list_headers(self, metadata: dict[str, Any]) -> FetchResponse:
        """List header rules."""
        return await self.core.fetch("/services/{serviceId}/headers", "get", metadata=metadata)

    async def add_headers(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Add header rule."""
        return await self.core.fetch("/services/{serviceId}/headers", "post", body, metadata)

    async def update_headers(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Replace header rules."""
        return await self.core.fetch("/services/{serviceId}/headers", "put", body, metadata)

    async def delete_header(self, metadata: dict[str, Any]) -> FetchResponse:
        """Delete header rule."""
        return await self.core.fetch("/services/{serviceId}/headers/{headerId}", "delete", metadata=metadata)

    async def list_routes(self, metadata: dict[str, Any]) -> FetchResponse:
        """List redirect/rewrite rules."""
        return await self.core.fetch("/services/{serviceId}/routes", "get", metadata=metadata)

    async def add_route(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Add redirect/rewrite rules."""
        return await self.core.fetch("/services/{serviceId}/routes", "post", body, metadata)

    async def patch_route(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Update redirect/rewrite rule priority."""
        return await self.core.fetch("/services/{serviceId}/routes", "patch", body, metadata)

    async def put_routes(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Update redirect/rewrite rules."""
        return await self.core.fetch("/services/{serviceId}/routes", "put", body, metadata)

    async def delete_route(self, metadata: dict[str, Any]) -> FetchResponse:
        """Delete redirect/rewrite rule."""
        return await self.core.fetch("/services/{serviceId}/routes/{routeId}", "delete", metadata=metadata)

    async def list_custom_domains(self, metadata: dict[str, Any]) -> FetchResponse:
        """List custom domains."""
        return await self.core.fetch("/services/{serviceId}/custom-domains", "get", metadata=metadata)

    async def create_custom_domain(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Add custom domain."""
        return await self.core.fetch("/services/{serviceId}/custom-domains", "post", body, metadata)

    async def retrieve_custom_domain(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve custom domain."""
        return await self.core.fetch("/services/{serviceId}/custom-domains/{customDomainIdOrName}", "get", metadata=metadata)

    async def delete_custom_domain(self, metadata: dict[str, Any]) -> FetchResponse:
        """Delete custom domain."""
        return await self.core.fetch("/services/{serviceId}/custom-domains/{customDomainIdOrName}", "delete", metadata=metadata)

    async def refresh_custom_domain(self, metadata: dict[str, Any]) -> FetchResponse:
        """Verify DNS configuration."""
        return await self.core.fetch("/services/{serviceId}/custom-domains/{customDomainIdOrName}/verify", "post", metadata=metadata)

    async def suspend_service(self, metadata: dict[str, Any]) -> FetchResponse:
        """Suspend service."""
        return await self.core.fetch("/services/{serviceId}/suspend", "post", metadata=metadata)

    async def resume_service(self, metadata: dict[str, Any]) -> FetchResponse:
        """Resume service."""
        return await self.core.fetch("/services/{serviceId}/resume", "post", metadata=metadata)

    async def restart_service(self, metadata: dict[str, Any]) -> FetchResponse:
        """Restart service."""
        return await self.core.fetch("/services/{serviceId}/restart", "post", metadata=metadata)

    async def scale_service(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Scale instance count."""
        return await self.core.fetch("/services/{serviceId}/scale", "post", body, metadata)

    async def autoscale_service(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Update autoscaling config."""
        return await self.core.fetch("/services/{serviceId}/autoscaling", "put", body, metadata)

    async def delete_autoscaling_config(self, metadata: dict[str, Any]) -> FetchResponse:
        """Delete autoscaling config."""
        return await self.core.fetch("/services/{serviceId}/autoscaling", "delete", metadata=metadata)

    async def preview_service(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Create service preview (image-backed)."""
        return await self.core.fetch("/services/{serviceId}/preview", "post", body, metadata)

    async def list_job(self, metadata: dict[str, Any]) -> FetchResponse:
        """List jobs."""
        return await self.core.fetch("/services/{serviceId}/jobs", "get", metadata=metadata)

    async def post_job(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Create job."""
        return await self.core.fetch("/services/{serviceId}/jobs", "post", body, metadata)

    async def retrieve_job(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve job."""
        return await self.core.fetch("/services/{serviceId}/jobs/{jobId}", "get", metadata=metadata)

    async def cancel_job(self, metadata: dict[str, Any]) -> FetchResponse:
        """Cancel running job."""
        return await self.core.fetch("/services/{serviceId}/jobs/{jobId}/cancel", "post", metadata=metadata)

    # --- cron-jobs ---

    async def run_cron_job(self, metadata: dict[str, Any]) -> FetchResponse:
        """Trigger cron job run."""
        return await self.core.fetch("/cron-jobs/{cronJobId}/runs", "post", metadata=metadata)

    async def cancel_cron_job_run(self, metadata: dict[str, Any]) -> FetchResponse:
        """Cancel running cron job."""
        return await self.core.fetch("/cron-jobs/{cronJobId}/runs", "delete", metadata=metadata)

    # --- logs ---

    async def list_logs(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """List logs."""
        return await self.core.fetch("/logs", "get", metadata=metadata)

    async def subscribe_logs(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """Subscribe to new logs."""
        return await self.core.fetch("/logs/subscribe", "get", metadata=metadata)

    async def list_logs_values(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """List log label values."""
        return await self.core.fetch("/logs/values", "get", metadata=metadata)

    async def get_owner_log_stream(self, metadata: dict[str, Any]) -> FetchResponse:
        """Get owner log stream."""
        return await self.core.fetch("/logs/streams/owner/{ownerId}", "get", metadata=metadata)

    async def update_owner_log_stream(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Update owner log stream."""
        return await self.core.fetch("/logs/streams/owner/{ownerId}", "put", body, metadata)

    async def delete_owner_log_stream(self, metadata: dict[str, Any]) -> FetchResponse:
        """Delete owner log stream."""
        return await self.core.fetch("/logs/streams/owner/{ownerId}", "delete", metadata=metadata)

    async def list_resource_log_streams(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """List resource log stream overrides."""
        return await self.core.fetch("/logs/streams/resource", "get", metadata=metadata)

    async def get_resource_log_stream(self, metadata: dict[str, Any]) -> FetchResponse:
        """Get resource log stream override."""
        return await self.core.fetch("/logs/streams/resource/{resourceId}", "get", metadata=metadata)

    async def update_resource_log_stream(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Update resource log stream override."""
        return await self.core.fetch("/logs/streams/resource/{resourceId}", "put", body, metadata)

    async def delete_resource_log_stream(self, metadata: dict[str, Any]) -> FetchResponse:
        """Delete resource log stream override."""
        return await self.core.fetch("/logs/streams/resource/{resourceId}", "delete", metadata=metadata)

    # --- metrics ---

    async def get_cpu(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """Get CPU usage."""
        return await self.core.fetch("/metrics/cpu", "get", metadata=metadata)

    async def get_cpu_limit(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """Get CPU limit."""
        return await self.core.fetch("/metrics/cpu-limit", "get", metadata=metadata)

    async def get_cpu_target(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """Get CPU target."""
        return await self.core.fetch("/metrics/cpu-target", "get", metadata=metadata)

    async def get_memory(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """Get memory usage."""
        return await self.core.fetch("/metrics/memory", "get", metadata=metadata)

    async def get_memory_limit(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """Get memory limit."""
        return await self.core.fetch("/metrics/memory-limit", "get", metadata=metadata)

    async def get_memory_target(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """Get memory target."""
        return await self.core.fetch("/metrics/memory-target", "get", metadata=metadata)

    async def get_http_requests(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """Get HTTP request count."""
        return await self.core.fetch("/metrics/http-requests", "get", metadata=metadata)

    async def get_http_latency(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """Get HTTP latency."""
        return await self.core.fetch("/metrics/http-latency", "get", metadata=metadata)

    async def get_bandwidth(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """Get bandwidth usage."""
        return await self.core.fetch("/metrics/bandwidth", "get", metadata=metadata)

    async def get_disk_usage(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """Get disk usage."""
        return await self.core.fetch("/metrics/disk-usage", "get", metadata=metadata)

    async def get_disk_capacity(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """Get disk capacity."""
        return await self.core.fetch("/metrics/disk-capacity", "get", metadata=metadata)

    async def get_instance_count(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """Get instance count."""
        return await self.core.fetch("/metrics/instance-count", "get", metadata=metadata)

    async def get_active_connections(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """Get active connection count."""
        return await self.core.fetch("/metrics/active-connections", "get", metadata=metadata)

    async def get_replication_lag(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """Get replica lag."""
        return await self.core.fetch("/metrics/replication-lag", "get", metadata=metadata)

    async def list_application_filter_values(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """List queryable instance values."""
        return await self.core.fetch("/metrics/filters/application", "get", metadata=metadata)

    async def list_http_filter_values(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """List queryable status codes and host values."""
        return await self.core.fetch("/metrics/filters/http", "get", metadata=metadata)

    async def list_path_filter_values(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """List queryable paths."""
        return await self.core.fetch("/metrics/filters/path", "get", metadata=metadata)

    # --- redis ---

    async def list_redis(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """List Redis instances."""
        return await self.core.fetch("/redis", "get", metadata=metadata)

    async def create_redis(self, body: dict[str, Any]) -> FetchResponse:
        """Create Redis instance."""
        return await self.core.fetch("/redis", "post", body)

    async def retrieve_redis(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve Redis instance."""
        return await self.core.fetch("/redis/{redisId}", "get", metadata=metadata)

    async def update_redis(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Update Redis instance."""
        return await self.core.fetch("/redis/{redisId}", "patch", body, metadata)

    async def delete_redis(self, metadata: dict[str, Any]) -> FetchResponse:
        """Delete Redis instance."""
        return await self.core.fetch("/redis/{redisId}", "delete", metadata=metadata)

    async def retrieve_redis_connection_info(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve Redis connection info."""
        return await self.core.fetch("/redis/{redisId}/connection-info", "get", metadata=metadata)

    # --- postgres ---

    async def list_postgres(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """List PostgreSQL instances."""
        return await self.core.fetch("/postgres", "get", metadata=metadata)

    async def create_postgres(self, body: dict[str, Any]) -> FetchResponse:
        """Create PostgreSQL instance."""
        return await self.core.fetch("/postgres", "post", body)

    async def retrieve_postgres(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve PostgreSQL instance."""
        return await self.core.fetch("/postgres/{postgresId}", "get", metadata=metadata)

    async def update_postgres(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Update PostgreSQL instance."""
        return await self.core.fetch("/postgres/{postgresId}", "patch", body, metadata)

    async def delete_postgres(self, metadata: dict[str, Any]) -> FetchResponse:
        """Delete PostgreSQL instance."""
        return await self.core.fetch("/postgres/{postgresId}", "delete", metadata=metadata)

    async def retrieve_postgres_connection_info(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve PostgreSQL connection info."""
        return await self.core.fetch("/postgres/{postgresId}/connection-info", "get", metadata=metadata)

    async def retrieve_postgres_recovery_info(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve point-in-time recovery status."""
        return await self.core.fetch("/postgres/{postgresId}/recovery", "get", metadata=metadata)

    async def recover_postgres(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Trigger point-in-time recovery."""
        return await self.core.fetch("/postgres/{postgresId}/recovery", "post", body, metadata)

    async def suspend_postgres(self, metadata: dict[str, Any]) -> FetchResponse:
        """Suspend PostgreSQL instance."""
        return await self.core.fetch("/postgres/{postgresId}/suspend", "post", metadata=metadata)

    async def resume_postgres(self, metadata: dict[str, Any]) -> FetchResponse:
        """Resume PostgreSQL instance."""
        return await self.core.fetch("/postgres/{postgresId}/resume", "post", metadata=metadata)

    async def restart_postgres(self, metadata: dict[str, Any]) -> FetchResponse:
        """Restart PostgreSQL instance."""
        return await self.core.fetch("/postgres/{postgresId}/restart", "post", metadata=metadata)

    async def failover_postgres(self, metadata: dict[str, Any]) -> FetchResponse:
        """Failover PostgreSQL instance."""
        return await self.core.fetch("/postgres/{postgresId}/failover", "post", metadata=metadata)

    async def list_postgres_backup(self, metadata: dict[str, Any]) -> FetchResponse:
        """List PostgreSQL backups."""
        return await self.core.fetch("/postgres/{postgresId}/backup", "get", metadata=metadata)

    async def create_postgres_backup(self, metadata: dict[str, Any]) -> FetchResponse:
        """Create PostgreSQL backup."""
        return await self.core.fetch("/postgres/{postgresId}/backup", "post", metadata=metadata)

    # --- projects ---

    async def list_projects(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """List projects."""
        return await self.core.fetch("/projects", "get", metadata=metadata)

    async def create_project(self, body: dict[str, Any]) -> FetchResponse:
        """Create project."""
        return await self.core.fetch("/projects", "post", body)

    async def retrieve_project(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve Project."""
        return await self.core.fetch("/projects/{projectId}", "get", metadata=metadata)

    async def update_project(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Update project."""
        return await self.core.fetch("/projects/{projectId}", "patch", body, metadata)

    async def delete_project(self, metadata: dict[str, Any]) -> FetchResponse:
        """Delete project."""
        return await self.core.fetch("/projects/{projectId}", "delete", metadata=metadata)

    # --- environments ---

    async def create_environment(self, body: dict[str, Any]) -> FetchResponse:
        """Create environment."""
        return await self.core.fetch("/environments", "post", body)

    async def list_environments(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """List environments."""
        return await self.core.fetch("/environments", "get", metadata=metadata)

    async def retrieve_environment(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve environment."""
        return await self.core.fetch("/environments/{environmentId}", "get", metadata=metadata)

    async def update_environment(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Update environment."""
        return await self.core.fetch("/environments/{environmentId}", "patch", body, metadata)

    async def delete_environment(self, metadata: dict[str, Any]) -> FetchResponse:
        """Delete environment."""
        return await self.core.fetch("/environments/{environmentId}", "delete", metadata=metadata)

    async def add_resources_to_environment(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Add resources to environment."""
        return await self.core.fetch("/environments/{environmentId}/resources", "post", body, metadata)

    async def remove_resources_from_environment(self, metadata: dict[str, Any]) -> FetchResponse:
        """Remove resources from environment."""
        return await self.core.fetch("/environments/{environmentId}/resources", "delete", metadata=metadata)

    # --- env-groups ---

    async def list_env_groups(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """List environment groups."""
        return await self.core.fetch("/env-groups", "get", metadata=metadata)

    async def create_env_group(self, body: dict[str, Any]) -> FetchResponse:
        """Create environment group."""
        return await self.core.fetch("/env-groups", "post", body)

    async def retrieve_env_group(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve environment group."""
        return await self.core.fetch("/env-groups/{envGroupId}", "get", metadata=metadata)

    async def update_env_group(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Update environment group."""
        return await self.core.fetch("/env-groups/{envGroupId}", "patch", body, metadata)

    async def delete_env_group(self, metadata: dict[str, Any]) -> FetchResponse:
        """Delete environment group."""
        return await self.core.fetch("/env-groups/{envGroupId}", "delete", metadata=metadata)

    async def link_service_to_env_group(self, metadata: dict[str, Any]) -> FetchResponse:
        """Link service."""
        return await self.core.fetch("/env-groups/{envGroupId}/services/{serviceId}", "post", metadata=metadata)

    async def unlink_service_from_env_group(self, metadata: dict[str, Any]) -> FetchResponse:
        """Unlink service."""
        return await self.core.fetch("/env-groups/{envGroupId}/services/{serviceId}", "delete", metadata=metadata)

    async def retrieve_env_group_env_var(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve environment variable."""
        return await self.core.fetch("/env-groups/{envGroupId}/env-vars/{envVarKey}", "get", metadata=metadata)

    async def update_env_group_env_var(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Add or update environment variable."""
        return await self.core.fetch("/env-groups/{envGroupId}/env-vars/{envVarKey}", "put", body, metadata)

    async def delete_env_group_env_var(self, metadata: dict[str, Any]) -> FetchResponse:
        """Remove environment variable."""
        return await self.core.fetch("/env-groups/{envGroupId}/env-vars/{envVarKey}", "delete", metadata=metadata)

    async def retrieve_env_group_secret_file(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve secret file."""
        return await self.core.fetch("/env-groups/{envGroupId}/secret-files/{secretFileName}", "get", metadata=metadata)

    async def update_env_group_secret_file(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Add or update secret file."""
        return await self.core.fetch("/env-groups/{envGroupId}/secret-files/{secretFileName}", "put", body, metadata)

    async def delete_env_group_secret_file(self, metadata: dict[str, Any]) -> FetchResponse:
        """Remove secret file."""
        return await self.core.fetch("/env-groups/{envGroupId}/secret-files/{secretFileName}", "delete", metadata=metadata)

    # --- maintenance ---

    async def list_maintenance(self, metadata: dict[str, Any] | None = None) -> FetchResponse:
        """List maintenance runs."""
        return await self.core.fetch("/maintenance", "get", metadata=metadata)

    async def retrieve_maintenance(self, metadata: dict[str, Any]) -> FetchResponse:
        """Retrieve maintenance run."""
        return await self.core.fetch("/maintenance/{maintenanceRunParam}", "get", metadata=metadata)

    async def update_maintenance(self, body: dict[str, Any], metadata: dict[str, Any]) -> FetchResponse:
        """Update maintenance run."""
        return await self.core.fetch("/maintenance/{maintenanceRunParam}", "patch", body, metadata)

    async def trigger_maintenance(self, metadata: dict[str, Any]) -> FetchResponse:
        """Trigger maintenance run."""
        return await self.core.fetch("/maintenance/{maintenanceRunParam}/trigger", "post", metadata=metadata)
