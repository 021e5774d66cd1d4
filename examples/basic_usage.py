"""Basic usage examples for the MeteoSwiss client."""

from meteoswiss import MeteoSwissClient, MeteoSwissError, MeteoSwissTransportError


def main() -> None:
    with MeteoSwissClient(timeout_ms=10_000, buffer_size=256 * 1024) as client:
        # Current conditions in Geneva
        print("=== Geneva (1201) ===")
        try:
            report = client.query(1201)
        except MeteoSwissTransportError as exc:
            print(f"  Network problem, try again later: {exc}")
            return
        except MeteoSwissError as exc:
            print(f"  Unusable response: {exc}")
            return

        current = report.current_weather
        print(f"  {current.temperature:.1f}°C at {current.observed_at}")

        # Forecast days
        print(f"\n=== {report.forecast_count}-day forecast ===")
        for day in report.forecast:
            print(
                f"  {day.day_date}: {day.temperature_min:.0f}..{day.temperature_max:.0f}°C, "
                f"{day.precipitation:.1f} mm"
            )

        # 10-minute precipitation series
        graph = report.graph
        print(f"\n=== Precipitation from {graph.start_datetime} ===")
        print(f"  {graph.precipitation10m_count} values, max {max(graph.precipitation10m, default=0):.1f} mm")

        report.release()


if __name__ == "__main__":
    main()
