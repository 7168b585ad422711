"""Basic usage examples for the tempo client, store and widget provider."""

import os
import tempfile

from tempo import AppGroupStore, WeatherClient, WeatherStoreBridge, WeatherTimelineProvider
from tempo.formatters import widget_lines


def main() -> None:
    api_key = os.environ.get("TEMPO_API_KEY", "")

    # Current weather in Seoul
    with WeatherClient(api_key=api_key) as client:
        record = client.current_weather(37.5665, 126.978)
    print(f"=== {record.name} ===")
    print(f"  {record.main.temp:.1f}°C (feels like {record.main.feels_like:.1f}°C)")
    print(f"  {record.description}, humidity {record.main.humidity}%")

    # Share it with the widget through a throwaway app group
    with tempfile.TemporaryDirectory() as root:
        store = AppGroupStore("group.example.tempo", root, create=True)
        bridge = WeatherStoreBridge(store)
        bridge.save(record)

        timeline = WeatherTimelineProvider(bridge).timeline()
        print("\n=== Widget ===")
        for line in widget_lines(timeline.entries[0]):
            print(f"  {line}")
        print(f"  next refresh: {timeline.refresh_at:%H:%M}")


if __name__ == "__main__":
    main()
