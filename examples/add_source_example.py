"""Example: adding a new series source without modifying the registry module.

Registers a `sawtooth` kind at runtime, then scans it. A sawtooth repeats
every `period` points, so every window recurs.
"""

from typing import List

from series_motifs.fingerprints import Fingerprinter
from series_motifs.fingerprints.projections import no_meta, point_index, quantized_value
from series_motifs.sources import SeriesPoint, SeriesSource, SeriesSpec, list_sources, make_source, register_source


class SawtoothSource(SeriesSource):
    kind = "sawtooth"

    def load(self) -> List[SeriesPoint]:
        period = int(self.spec.period)
        return [
            SeriesPoint(self.spec.timestamp(x), (x % period) / period)
            for x in range(self.spec.length)
        ]


register_source("sawtooth", SawtoothSource)

print("Registered sources:")
for kind, origin in list_sources().items():
    print(f"  {kind}: {origin}")

points = make_source(SeriesSpec(name="saw", kind="sawtooth", length=1000, period=100)).load()
fp = Fingerprinter(quantized_value(4), point_index, no_meta, window_size=50)
fp.process_series(points)
for group in fp.duplicates():
    print(f"{len(group)} occurrences, first at {group[0].start_index}")
    break

# Now it can be used in a scan config:
# series:
#   - name: saw
#     kind: sawtooth
#     length: 1000
#     period: 100
