"""
PONTOS Vessel Data Module
=======================================================

* Downloads per-day vessel telemetry from the PONTOS data hub
(https://pontos.ri.se/api, a PostgREST API) and exports it as CSV files,
one file per parameter and day.
* All parameter streams of a day are requested concurrently and joined;
one failed request fails the whole day, nothing is retried.
* Longitude and latitude are merged into positions on exact timestamps.

* Notes
- The bearer token is read from PONTOS_TOKEN (environment or `.env`).
- Days are UTC and half-open: [date 00:00, date+1 00:00).

* Parameters
------
    positioningsystem_latitude_deg_1   -> latitude
    positioningsystem_longitude_deg_1  -> longitude
    positioningsystem_sog_kn_1         -> sog
    steering_order_deg_1               -> steering_order
    steering_angle_deg_1               -> steering_angle
    positioningsystem_heading_deg_1    -> heading
    positioningsystem_cog_deg_1        -> cog
    enginemain_fuelcons_lph_1          -> enginemain_fuelcons
    rudder_order_deg_1                 -> rudder_order
    rudder_angle_deg_1                 -> rudder_angle
"""
