"""Chrome Management API v1 schemas."""

from datetime import datetime
from typing import List, Optional

from gapihub.sdk.schema import Duration, GoogleRpcStatus, GoogleTypeDate, Int64, Schema


# --- App details ---

class AndroidAppPermission(Schema):
    type: Optional[str] = None


class AndroidAppInfo(Schema):
    permissions: Optional[List[AndroidAppPermission]] = None


class ChromeAppPermission(Schema):
    access_user_data: Optional[bool] = None
    documentation_uri: Optional[str] = None
    type: Optional[str] = None


class ChromeAppSiteAccess(Schema):
    host_match: Optional[str] = None


class ChromeAppInfo(Schema):
    google_owned: Optional[bool] = None
    is_cws_hosted: Optional[bool] = None
    is_extension_policy_supported: Optional[bool] = None
    is_kiosk_only: Optional[bool] = None
    is_theme: Optional[bool] = None
    kiosk_enabled: Optional[bool] = None
    min_user_count: Optional[int] = None
    permissions: Optional[List[ChromeAppPermission]] = None
    site_access: Optional[List[ChromeAppSiteAccess]] = None
    support_enabled: Optional[bool] = None
    type: Optional[str] = None


class AppDetails(Schema):
    """Resource representing app details."""
    android_app_info: Optional[AndroidAppInfo] = None
    app_id: Optional[str] = None
    chrome_app_info: Optional[ChromeAppInfo] = None
    description: Optional[str] = None
    detail_uri: Optional[str] = None
    display_name: Optional[str] = None
    first_publish_time: Optional[datetime] = None
    homepage_uri: Optional[str] = None
    icon_uri: Optional[str] = None
    is_paid_app: Optional[bool] = None
    latest_publish_time: Optional[datetime] = None
    name: Optional[str] = None
    privacy_policy_uri: Optional[str] = None
    publisher: Optional[str] = None
    review_number: Optional[Int64] = None
    review_rating: Optional[float] = None
    revision_id: Optional[str] = None
    service_error: Optional[GoogleRpcStatus] = None
    type: Optional[str] = None


# --- Reports ---

class ChromeAppRequest(Schema):
    app_details: Optional[str] = None
    app_id: Optional[str] = None
    detail_uri: Optional[str] = None
    display_name: Optional[str] = None
    icon_uri: Optional[str] = None
    latest_request_time: Optional[datetime] = None
    request_count: Optional[Int64] = None


class CountChromeAppRequestsResponse(Schema):
    next_page_token: Optional[str] = None
    requested_apps: Optional[List[ChromeAppRequest]] = None
    total_size: Optional[int] = None


class DeviceAueCountReport(Schema):
    aue_month: Optional[str] = None
    aue_year: Optional[Int64] = None
    count: Optional[Int64] = None
    expired: Optional[bool] = None
    model: Optional[str] = None


class CountChromeDevicesReachingAutoExpirationDateResponse(Schema):
    device_aue_count_reports: Optional[List[DeviceAueCountReport]] = None


class CountChromeDevicesThatNeedAttentionResponse(Schema):
    no_recent_policy_sync_count: Optional[Int64] = None
    no_recent_user_activity_count: Optional[Int64] = None
    os_version_not_compliant_count: Optional[Int64] = None
    pending_update: Optional[Int64] = None
    unsupported_policy_count: Optional[Int64] = None


class DeviceHardwareCountReport(Schema):
    bucket: Optional[str] = None
    count: Optional[Int64] = None


class CountChromeHardwareFleetDevicesResponse(Schema):
    cpu_reports: Optional[List[DeviceHardwareCountReport]] = None
    memory_reports: Optional[List[DeviceHardwareCountReport]] = None
    model_reports: Optional[List[DeviceHardwareCountReport]] = None
    storage_reports: Optional[List[DeviceHardwareCountReport]] = None


class BrowserVersion(Schema):
    channel: Optional[str] = None
    count: Optional[Int64] = None
    device_os_version: Optional[str] = None
    system: Optional[str] = None
    version: Optional[str] = None


class CountChromeVersionsResponse(Schema):
    browser_versions: Optional[List[BrowserVersion]] = None
    next_page_token: Optional[str] = None
    total_size: Optional[int] = None


class InstalledApp(Schema):
    app_id: Optional[str] = None
    app_install_type: Optional[str] = None
    app_source: Optional[str] = None
    app_type: Optional[str] = None
    browser_device_count: Optional[Int64] = None
    description: Optional[str] = None
    disabled: Optional[bool] = None
    display_name: Optional[str] = None
    homepage_uri: Optional[str] = None
    os_user_count: Optional[Int64] = None
    permissions: Optional[List[str]] = None


class CountInstalledAppsResponse(Schema):
    installed_apps: Optional[List[InstalledApp]] = None
    next_page_token: Optional[str] = None
    total_size: Optional[int] = None


class Device(Schema):
    device_id: Optional[str] = None
    machine: Optional[str] = None


class FindInstalledAppDevicesResponse(Schema):
    devices: Optional[List[Device]] = None
    next_page_token: Optional[str] = None
    total_size: Optional[int] = None


# --- Telemetry ---

class AudioStatusReport(Schema):
    input_device: Optional[str] = None
    input_gain: Optional[int] = None
    input_mute: Optional[bool] = None
    output_device: Optional[str] = None
    output_mute: Optional[bool] = None
    output_volume: Optional[int] = None
    report_time: Optional[datetime] = None


class BatteryInfo(Schema):
    design_capacity: Optional[Int64] = None
    design_min_voltage: Optional[int] = None
    manufacture_date: Optional[GoogleTypeDate] = None
    manufacturer: Optional[str] = None
    serial_number: Optional[str] = None
    technology: Optional[str] = None


class BatterySampleReport(Schema):
    charge_rate: Optional[int] = None
    current: Optional[Int64] = None
    discharge_rate: Optional[int] = None
    remaining_capacity: Optional[Int64] = None
    report_time: Optional[datetime] = None
    status: Optional[str] = None
    temperature: Optional[int] = None
    voltage: Optional[Int64] = None


class BatteryStatusReport(Schema):
    battery_health: Optional[str] = None
    cycle_count: Optional[int] = None
    full_charge_capacity: Optional[Int64] = None
    report_time: Optional[datetime] = None
    sample: Optional[List[BatterySampleReport]] = None
    serial_number: Optional[str] = None


class BootPerformanceReport(Schema):
    boot_up_duration: Optional[Duration] = None
    boot_up_time: Optional[datetime] = None
    report_time: Optional[datetime] = None
    shutdown_duration: Optional[Duration] = None
    shutdown_reason: Optional[str] = None
    shutdown_time: Optional[datetime] = None


class CpuInfo(Schema):
    architecture: Optional[str] = None
    keylocker_configured: Optional[bool] = None
    keylocker_supported: Optional[bool] = None
    max_clock_speed: Optional[int] = None
    model: Optional[str] = None


class CpuTemperatureInfo(Schema):
    label: Optional[str] = None
    temperature_celsius: Optional[int] = None


class CpuStatusReport(Schema):
    cpu_temperature_info: Optional[List[CpuTemperatureInfo]] = None
    cpu_utilization_pct: Optional[int] = None
    report_time: Optional[datetime] = None
    sample_frequency: Optional[Duration] = None


class GraphicsAdapterInfo(Schema):
    adapter: Optional[str] = None
    device_id: Optional[Int64] = None
    driver_version: Optional[str] = None


class GraphicsInfo(Schema):
    adapter_info: Optional[GraphicsAdapterInfo] = None


class DisplayInfo(Schema):
    device_id: Optional[Int64] = None
    is_internal: Optional[bool] = None
    refresh_rate: Optional[int] = None
    resolution_height: Optional[int] = None
    resolution_width: Optional[int] = None


class GraphicsStatusReport(Schema):
    displays: Optional[List[DisplayInfo]] = None
    report_time: Optional[datetime] = None


class TotalMemoryEncryptionInfo(Schema):
    encryption_algorithm: Optional[str] = None
    encryption_state: Optional[str] = None
    key_length: Optional[Int64] = None
    max_keys: Optional[Int64] = None


class MemoryInfo(Schema):
    available_ram_bytes: Optional[Int64] = None
    total_memory_encryption: Optional[TotalMemoryEncryptionInfo] = None
    total_ram_bytes: Optional[Int64] = None


class MemoryStatusReport(Schema):
    page_faults: Optional[int] = None
    report_time: Optional[datetime] = None
    sample_frequency: Optional[Duration] = None
    system_ram_free_bytes: Optional[Int64] = None


class HttpsLatencyRoutineData(Schema):
    latency: Optional[Duration] = None
    problem: Optional[str] = None


class NetworkDiagnosticsReport(Schema):
    https_latency_data: Optional[HttpsLatencyRoutineData] = None
    report_time: Optional[datetime] = None


class NetworkDevice(Schema):
    iccid: Optional[str] = None
    imei: Optional[str] = None
    mac_address: Optional[str] = None
    mdn: Optional[str] = None
    meid: Optional[str] = None
    type: Optional[str] = None


class NetworkInfo(Schema):
    network_devices: Optional[List[NetworkDevice]] = None


class NetworkStatusReport(Schema):
    connection_state: Optional[str] = None
    connection_type: Optional[str] = None
    encryption_on: Optional[bool] = None
    gateway_ip_address: Optional[str] = None
    guid: Optional[str] = None
    lan_ip_address: Optional[str] = None
    receiving_bit_rate_mbps: Optional[Int64] = None
    report_time: Optional[datetime] = None
    sample_frequency: Optional[Duration] = None
    signal_strength_dbm: Optional[int] = None
    transmission_bit_rate_mbps: Optional[Int64] = None
    transmission_power_dbm: Optional[int] = None
    wifi_link_quality: Optional[Int64] = None
    wifi_power_management_enabled: Optional[bool] = None


class OsUpdateStatus(Schema):
    last_reboot_time: Optional[datetime] = None
    last_update_check_time: Optional[datetime] = None
    last_update_time: Optional[datetime] = None
    new_platform_version: Optional[str] = None
    new_requested_platform_version: Optional[str] = None
    update_state: Optional[str] = None


class StorageInfoDiskVolume(Schema):
    storage_free_bytes: Optional[Int64] = None
    storage_total_bytes: Optional[Int64] = None
    volume_id: Optional[str] = None


class StorageInfo(Schema):
    available_disk_bytes: Optional[Int64] = None
    total_disk_bytes: Optional[Int64] = None
    volume: Optional[List[StorageInfoDiskVolume]] = None


class DiskInfo(Schema):
    bytes_read_this_session: Optional[Int64] = None
    bytes_written_this_session: Optional[Int64] = None
    discard_time_this_session: Optional[Duration] = None
    health: Optional[str] = None
    io_time_this_session: Optional[Duration] = None
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    read_time_this_session: Optional[Duration] = None
    serial_number: Optional[str] = None
    size_bytes: Optional[Int64] = None
    type: Optional[str] = None
    volume_ids: Optional[List[str]] = None
    write_time_this_session: Optional[Duration] = None


class StorageStatusReport(Schema):
    disk: Optional[List[DiskInfo]] = None
    report_time: Optional[datetime] = None


class ThunderboltInfo(Schema):
    security_level: Optional[str] = None


class TelemetryDevice(Schema):
    """Telemetry data collected from a managed device."""
    audio_status_report: Optional[List[AudioStatusReport]] = None
    battery_info: Optional[List[BatteryInfo]] = None
    battery_status_report: Optional[List[BatteryStatusReport]] = None
    boot_performance_report: Optional[List[BootPerformanceReport]] = None
    cpu_info: Optional[List[CpuInfo]] = None
    cpu_status_report: Optional[List[CpuStatusReport]] = None
    customer: Optional[str] = None
    device_id: Optional[str] = None
    graphics_info: Optional[GraphicsInfo] = None
    graphics_status_report: Optional[List[GraphicsStatusReport]] = None
    memory_info: Optional[MemoryInfo] = None
    memory_status_report: Optional[List[MemoryStatusReport]] = None
    name: Optional[str] = None
    network_diagnostics_report: Optional[List[NetworkDiagnosticsReport]] = None
    network_info: Optional[NetworkInfo] = None
    network_status_report: Optional[List[NetworkStatusReport]] = None
    org_unit_id: Optional[str] = None
    os_update_status: Optional[List[OsUpdateStatus]] = None
    serial_number: Optional[str] = None
    storage_info: Optional[StorageInfo] = None
    storage_status_report: Optional[List[StorageStatusReport]] = None
    thunderbolt_info: Optional[List[ThunderboltInfo]] = None


class ListTelemetryDevicesResponse(Schema):
    devices: Optional[List[TelemetryDevice]] = None
    next_page_token: Optional[str] = None


class TelemetryDeviceInfo(Schema):
    device_id: Optional[str] = None
    org_unit_id: Optional[str] = None


class TelemetryUserInfo(Schema):
    email: Optional[str] = None
    org_unit_id: Optional[str] = None


class TelemetryAudioSevereUnderrunEvent(Schema):
    pass


class TelemetryHttpsLatencyChangeEvent(Schema):
    https_latency_routine_data: Optional[HttpsLatencyRoutineData] = None
    https_latency_state: Optional[str] = None


class UsbPeripheralReport(Schema):
    categories: Optional[List[str]] = None
    class_id: Optional[int] = None
    firmware_version: Optional[str] = None
    name: Optional[str] = None
    pid: Optional[int] = None
    subclass_id: Optional[int] = None
    vendor: Optional[str] = None
    vid: Optional[int] = None


class TelemetryUsbPeripheralsEvent(Schema):
    usb_peripheral_report: Optional[List[UsbPeripheralReport]] = None


class TelemetryEvent(Schema):
    audio_severe_underrun_event: Optional[TelemetryAudioSevereUnderrunEvent] = None
    device: Optional[TelemetryDeviceInfo] = None
    event_type: Optional[str] = None
    https_latency_change_event: Optional[TelemetryHttpsLatencyChangeEvent] = None
    name: Optional[str] = None
    report_time: Optional[datetime] = None
    usb_peripherals_event: Optional[TelemetryUsbPeripheralsEvent] = None
    user: Optional[TelemetryUserInfo] = None


class ListTelemetryEventsResponse(Schema):
    next_page_token: Optional[str] = None
    telemetry_events: Optional[List[TelemetryEvent]] = None
