from .air import (Zair, molarvolumeair, volumeair, molarenthalpyair, enthalpyair, molarentropyair, entropyair,
                  Zmoist, molarvolumemoist, volumemoist, molarenthalpymoist, enthalpymoist, molarentropymoist,
                  entropymoist, molarfracmoist_sat, tdew, air_props, moist_air_props, sat_table)
