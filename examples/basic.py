from civicmatch import Coordinate, JurisdictionMatcher, format_distance, haversine, seed_directory


def main() -> None:
    matcher = JurisdictionMatcher(seed_directory())

    here = Coordinate(12.9716, 77.5946)
    address = "100 Feet Road, Indiranagar, Bangalore, Karnataka, 560038"

    for match in matcher.find_authorities(here, address, "pothole"):
        print(match.handle, match.name, match.confidence, match.match_reason.value)

    print(matcher.get_authority_handles(here, address, "water_supply"))
    print(matcher.validate_authority_handle("BBMPCOMM"))

    mumbai = Coordinate(19.0760, 72.8777)
    print(format_distance(haversine(here, mumbai)))


if __name__ == "__main__":
    main()
