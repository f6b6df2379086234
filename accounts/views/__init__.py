from .jwt_views import RegisterView, LogInView, LogoutView, StatusView # noqa: F401
from .account_views import (
    RegisterRestaurantView, RestaurantLogInView, RestaurantLogoutView, # noqa: F401
    RestaurantStatusView, PublishRestaurantView, ManageRestaurantView, OpeningHoursView, # noqa: F401
)
from .favorite_views import AddFavoriteView, RemoveFavoriteView, FavoriteListView # noqa: F401
